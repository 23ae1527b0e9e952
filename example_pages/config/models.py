"""Typed dataclasses describing the example-site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import DEFAULT_ICON_SCRIPT_URL, SCREENSHOT_PLACEHOLDER
from ..models import CuratedExample


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """Resolved site configuration consumed by the CLI and page builder.

    Attributes
    ----------
    default_locale : str
        Locale used when a command does not name one.
    locales : list[str]
        Every locale the site publishes; ``default_locale`` is always included.
    content_dir : Path
        Root of the markdown content tree.
    demos_file : Path
        YAML listing of gallery demos.
    examples : list[CuratedExample]
        Curated ordering and title list for menu groups.
    icon_script_url : str
        Icon-font script handed to the presentation layer.
    screenshot_placeholder : str
        Image used for demos without a screenshot.
    """

    default_locale: str = "en"
    locales: list[str] = dc.field(default_factory=lambda: ["en"])
    content_dir: Path = Path("content")
    demos_file: Path = Path("demos.yaml")
    examples: list[CuratedExample] = dc.field(default_factory=list)
    icon_script_url: str = DEFAULT_ICON_SCRIPT_URL
    screenshot_placeholder: str = SCREENSHOT_PLACEHOLDER

    def resolve_locale(self, locale: str | None) -> str:
        """Return ``locale`` when published, else the default locale."""
        if locale is None:
            return self.default_locale
        if locale not in self.locales:
            available = ", ".join(self.locales)
            msg = f"Unknown locale '{locale}'. Known locales: {available}"
            raise SiteConfigError(msg)
        return locale


__all__ = ["SiteConfig", "SiteConfigError"]
