"""Icon-font class resolution for menu entries.

The resolver is constructed from the site configuration and handed to the
menu builder, so nothing reads icon settings from module state.

Examples
--------
>>> from example_pages.icons import IconResolver
>>> IconResolver().resolve("bar")
'icon-bar'
>>> IconResolver().resolve(None) is None
True
"""

from __future__ import annotations

import dataclasses as dc

from ._constants import DEFAULT_ICON_PREFIX, DEFAULT_ICON_SCRIPT_URL


@dc.dataclass(frozen=True, slots=True)
class IconResolver:
    """Map icon names from front matter to icon-font class names.

    Attributes
    ----------
    script_url : str
        Icon-font script the presentation layer loads once per page.
    prefix : str
        Prefix prepended to every icon name.
    """

    script_url: str = DEFAULT_ICON_SCRIPT_URL
    prefix: str = DEFAULT_ICON_PREFIX

    def resolve(self, name: str | None) -> str | None:
        """Return the icon class for ``name`` or ``None`` when unset."""
        if not name:
            return None
        return f"{self.prefix}{name}"


__all__ = ["IconResolver"]
