"""Load and validate the example-site configuration YAML.

This subpackage parses the project's ``site.yaml`` file, applies defaults for
locales, content locations and icon settings, and builds the curated example
list that drives menu ordering and sub-group titles. The primary entry point
is :func:`load_site_config`, which returns a :class:`SiteConfig` ready for the
page builder.

Examples
--------
>>> from pathlib import Path
>>> from example_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> [entry.slug for entry in site.examples]  # doctest: +SKIP
['bar', 'line']
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = ["SiteConfig", "SiteConfigError", "load_site_config"]
