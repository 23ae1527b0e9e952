"""Assemble the data payload for one example or gallery page.

:class:`ExamplePageBuilder` ties the router, the menu builder, and the gallery
categorizer together for a single request. Gallery pages receive the sider
menu, categorized demo cards, and previous/next links; example pages receive
the primary, API, and design records that share the active root identifier.
The returned :class:`ExamplePage` is plain data for the presentation layer.

Typical usage pairs the builder with loaded content:

>>> from example_pages.page import ExamplePageBuilder
>>> builder = ExamplePageBuilder(records, curated, demos)  # doctest: +SKIP
>>> page = builder.build("/en/examples/gallery", "en")  # doctest: +SKIP
>>> page.view  # doctest: +SKIP
'gallery'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import SCREENSHOT_PLACEHOLDER
from .gallery import categorize
from .icons import IconResolver
from .menu import adjacent_leaves, build_menu
from .router import companion_sections, page_view, resolve_active_section

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import (
        ActiveSection,
        ContentRecord,
        CuratedExample,
        DemoRecord,
        GalleryCategory,
        MenuLeaf,
        NavigationMenu,
    )
    from .paths import RecordKind
    from .router import PageView


@dc.dataclass(frozen=True, slots=True)
class ExamplePage:
    """Everything the presentation layer needs to draw one page."""

    view: PageView
    locale: str
    active: ActiveSection
    sections: dict[RecordKind, ContentRecord]
    menu: NavigationMenu | None = None
    categories: tuple[GalleryCategory, ...] = ()
    prev_leaf: MenuLeaf | None = None
    next_leaf: MenuLeaf | None = None
    icon_script_url: str | None = None

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "found": True,
            "view": self.view,
            "locale": self.locale,
            "active": self.active.to_dict(),
            "sections": {
                str(kind): record.to_dict() for kind, record in self.sections.items()
            },
            "menu": self.menu.to_dict() if self.menu else None,
            "categories": [category.to_dict() for category in self.categories],
            "prev": self.prev_leaf.to_dict() if self.prev_leaf else None,
            "next": self.next_leaf.to_dict() if self.next_leaf else None,
            "iconScriptUrl": self.icon_script_url,
        }


class ExamplePageBuilder:
    """Resolve requests against a fixed snapshot of site content."""

    def __init__(
        self,
        records: cabc.Sequence[ContentRecord],
        curated: cabc.Sequence[CuratedExample],
        demos: cabc.Sequence[DemoRecord] = (),
        *,
        icons: IconResolver | None = None,
        screenshot_placeholder: str = SCREENSHOT_PLACEHOLDER,
    ) -> None:
        """Initialize the builder with the content snapshot.

        Parameters
        ----------
        records : Sequence[ContentRecord]
            Every content record, companions included.
        curated : Sequence[CuratedExample]
            Curated ordering and title list from the site configuration.
        demos : Sequence[DemoRecord], optional
            Demos listed on the gallery page.
        icons : IconResolver, optional
            Icon resolver injected into the menu; defaults to stock settings.
        screenshot_placeholder : str, optional
            Image used for demos without a screenshot.
        """
        self.records = tuple(records)
        self.curated = tuple(curated)
        self.demos = tuple(demos)
        self.icons = icons or IconResolver()
        self.screenshot_placeholder = screenshot_placeholder

    def menu(self, locale: str, active_identifier: str | None = None) -> NavigationMenu:
        """Return the navigation menu for ``locale``."""
        return build_menu(
            self.records,
            self.curated,
            locale,
            active_identifier=active_identifier,
            icons=self.icons,
        )

    def gallery(self, locale: str) -> list[GalleryCategory]:
        """Return the gallery categories for ``locale``."""
        return categorize(
            self.demos, locale, placeholder=self.screenshot_placeholder
        )

    def build(self, requested_path: str, locale: str) -> ExamplePage | None:
        """Resolve ``requested_path`` into a page payload.

        Returns
        -------
        ExamplePage or None
            ``None`` when no record serves the path; the caller renders nothing.
        """
        active = resolve_active_section(requested_path, self.records)
        if active is None:
            return None
        sections = companion_sections(active.root_identifier, self.records)
        view = page_view(requested_path)
        if view == "example":
            return ExamplePage(
                view=view,
                locale=locale,
                active=active,
                sections=sections,
                icon_script_url=self.icons.script_url,
            )

        menu = self.menu(locale, active.root_identifier)
        prev_leaf, next_leaf = adjacent_leaves(menu, active.root_identifier)
        return ExamplePage(
            view=view,
            locale=locale,
            active=active,
            sections=sections,
            menu=menu,
            categories=tuple(self.gallery(locale)),
            prev_leaf=prev_leaf,
            next_leaf=next_leaf,
            icon_script_url=self.icons.script_url,
        )


__all__ = ["ExamplePage", "ExamplePageBuilder"]
