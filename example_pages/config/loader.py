"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import DEFAULT_ICON_SCRIPT_URL, SCREENSHOT_PLACEHOLDER
from .helpers import _build_curated_examples, _normalize_locales, _optional_str
from .models import SiteConfig, SiteConfigError

DEFAULT_CONTENT_DIR = "content"
DEFAULT_DEMOS_FILE = "demos.yaml"


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the examples site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Relative ``content_dir`` and ``demos_file``
        entries resolve against the file's directory.

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for missing fields.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the ``defaults`` section or curated ``examples`` list is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from example_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.default_locale  # doctest: +SKIP
    'en'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' must be a mapping."
        raise SiteConfigError(msg)

    config_dir = path.parent
    default_locale = _optional_str(defaults.get("locale")) or "en"
    locales = _normalize_locales(defaults.get("locales"), default_locale)
    content_dir = config_dir / str(defaults.get("content_dir", DEFAULT_CONTENT_DIR))
    demos_file = config_dir / str(defaults.get("demos_file", DEFAULT_DEMOS_FILE))
    icon_script_url = (
        _optional_str(defaults.get("icon_script_url")) or DEFAULT_ICON_SCRIPT_URL
    )
    screenshot_placeholder = (
        _optional_str(defaults.get("screenshot_placeholder")) or SCREENSHOT_PLACEHOLDER
    )

    return SiteConfig(
        default_locale=default_locale,
        locales=locales,
        content_dir=content_dir,
        demos_file=demos_file,
        examples=_build_curated_examples(raw.get("examples")),
        icon_script_url=icon_script_url,
        screenshot_placeholder=screenshot_placeholder,
    )


__all__ = ["load_site_config"]
