"""Typed dataclasses for example-site records and the views built from them.

Input records (:class:`ContentRecord`, :class:`CuratedExample`,
:class:`DemoRecord`) are frozen snapshots for a single resolution pass. The
output dataclasses (:class:`NavigationMenu`, :class:`ActiveSection`,
:class:`GalleryCategory` and friends) form the plain data contract handed to
the presentation layer; each exposes ``to_dict`` for JSON serialization.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .paths import PathInfo, RecordKind, classify_identifier

LocalizedText = str | typ.Mapping[str, str]


def localize(value: LocalizedText | None, locale: str) -> str | None:
    """Return ``value`` itself when it is a string, else its ``locale`` entry."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return value.get(locale)


@dc.dataclass(frozen=True, slots=True)
class ContentRecord:
    """One parsed document from the examples content tree.

    Attributes
    ----------
    identifier : str
        Globally unique slash-delimited path, e.g. ``/en/examples/bar/basic``.
    title : str or Mapping[str, str]
        Display title, either plain or keyed by locale.
    order : int, optional
        Author-supplied sort position.
    icon : str, optional
        Icon name resolved by :class:`~example_pages.icons.IconResolver`.
    raw_body : str
        Rendered content; the engine never inspects it.
    relative_path : str, optional
        Source file path relative to the content root.
    path_info : PathInfo
        Kind and root identifier, derived once from ``identifier``.
    """

    identifier: str
    title: LocalizedText = ""
    order: int | None = None
    icon: str | None = None
    raw_body: str = ""
    relative_path: str | None = None
    path_info: PathInfo = dc.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path_info", classify_identifier(self.identifier))

    @property
    def kind(self) -> RecordKind:
        return self.path_info.kind

    @property
    def root_identifier(self) -> str:
        return self.path_info.root_identifier

    @property
    def is_companion(self) -> bool:
        return self.path_info.kind.is_companion

    def display_title(self, locale: str) -> str:
        """Return the title for ``locale``, falling back to the last segment."""
        title = localize(self.title, locale)
        if title:
            return title
        return self.identifier.rstrip("/").rsplit("/", 1)[-1]

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert to dictionary for JSON serialization (body excluded)."""
        title = self.title if isinstance(self.title, str) else dict(self.title)
        return {
            "identifier": self.identifier,
            "title": title,
            "order": self.order,
            "icon": self.icon,
            "kind": str(self.kind),
            "root_identifier": self.root_identifier,
            "relative_path": self.relative_path,
        }


@dc.dataclass(frozen=True, slots=True)
class CuratedExample:
    """Author-curated ordering and title entry keyed by locale-relative slug."""

    slug: str
    icon: str | None = None
    title: typ.Mapping[str, str] = dc.field(default_factory=dict)

    def title_for(self, locale: str) -> str | None:
        """Return the curated title for ``locale`` or ``None``."""
        return self.title.get(locale) or None


@dc.dataclass(frozen=True, slots=True)
class DemoFrontmatter:
    """Locale-specific front matter of the post a demo belongs to."""

    title: str | None = None
    order: int | None = None


@dc.dataclass(frozen=True, slots=True)
class DemoRecord:
    """A runnable demo listed in the gallery."""

    relative_path: str
    title: LocalizedText | None = None
    order: int | None = None
    screenshot: str | None = None
    filename: str | None = None
    post_frontmatter: typ.Mapping[str, DemoFrontmatter] = dc.field(
        default_factory=dict
    )

    def frontmatter_for(self, locale: str) -> DemoFrontmatter | None:
        return self.post_frontmatter.get(locale)


@dc.dataclass(frozen=True, slots=True)
class MenuLeaf:
    """A selectable menu entry linking to a primary record."""

    key: str
    label: str
    target_identifier: str
    icon: str | None = None

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, typ.Any] = {
            "key": self.key,
            "label": self.label,
            "targetIdentifier": self.target_identifier,
        }
        if self.icon:
            result["icon"] = self.icon
        return result


@dc.dataclass(frozen=True, slots=True)
class MenuGroup:
    """Menu group; collapsible when ``is_submenu`` is set."""

    key: str
    label: str
    children: tuple[MenuLeaf, ...]
    is_submenu: bool = False
    icon: str | None = None

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, typ.Any] = {
            "key": self.key,
            "label": self.label,
            "submenu": self.is_submenu,
            "children": [child.to_dict() for child in self.children],
        }
        if self.icon:
            result["icon"] = self.icon
        return result


@dc.dataclass(frozen=True, slots=True)
class NavigationMenu:
    """Ordered navigation tree plus the view state derived from the active page.

    Attributes
    ----------
    groups : tuple[MenuGroup, ...]
        Menu groups in display order.
    open_keys : tuple[str, ...]
        Sub-group keys that start expanded; every group key that prefixes the
        active identifier.
    selected_key : str, optional
        Identifier of the selected leaf.
    """

    groups: tuple[MenuGroup, ...]
    open_keys: tuple[str, ...] = ()
    selected_key: str | None = None

    def leaves(self) -> list[MenuLeaf]:
        """Return every leaf in display order."""
        return [leaf for group in self.groups for leaf in group.children]

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "groups": [group.to_dict() for group in self.groups],
            "openKeys": list(self.open_keys),
            "selectedKey": self.selected_key,
        }


@dc.dataclass(frozen=True, slots=True)
class ActiveSection:
    """Routing decision for a requested path."""

    record: ContentRecord
    section_kind: RecordKind
    root_identifier: str

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "record": self.record.to_dict(),
            "sectionKind": str(self.section_kind),
            "rootIdentifier": self.root_identifier,
        }


@dc.dataclass(frozen=True, slots=True)
class GalleryCard:
    """A demo card rendered in the gallery."""

    slug: str
    href: str
    title: str
    screenshot: str

    def to_dict(self) -> dict[str, str]:
        return {
            "slug": self.slug,
            "href": self.href,
            "title": self.title,
            "screenshot": self.screenshot,
        }


@dc.dataclass(frozen=True, slots=True)
class GalleryCategory:
    """Demos sharing a category label, in display order."""

    label: str
    anchor: str
    demos: tuple[GalleryCard, ...]

    def to_dict(self) -> dict[str, typ.Any]:
        return {
            "categoryLabel": self.label,
            "anchor": self.anchor,
            "demos": [demo.to_dict() for demo in self.demos],
        }


__all__ = [
    "ActiveSection",
    "ContentRecord",
    "CuratedExample",
    "DemoFrontmatter",
    "DemoRecord",
    "GalleryCard",
    "GalleryCategory",
    "LocalizedText",
    "MenuGroup",
    "MenuLeaf",
    "NavigationMenu",
    "localize",
]
