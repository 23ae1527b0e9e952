"""Dispatch a requested path to the content record and section it shows.

A request such as ``/en/examples/bar/basic/API/`` is normalized, classified as
primary, API companion, or design companion, and matched against the content
records. The resulting :class:`~example_pages.models.ActiveSection` carries
the root identifier shared by a page and its companions, which the menu uses
to select the active leaf and the page builder uses to gather siblings.

Unmatched requests return ``None``; callers render nothing.

Example
-------
>>> from example_pages.models import ContentRecord
>>> from example_pages.router import resolve_active_section
>>> records = [
...     ContentRecord("/en/examples/bar/basic"),
...     ContentRecord("/en/examples/bar/basic/API"),
... ]
>>> section = resolve_active_section("/en/examples/bar/basic/API/", records)
>>> (str(section.section_kind), section.root_identifier)
('api-companion', '/en/examples/bar/basic')
"""

from __future__ import annotations

import logging
import re
import typing as typ

from ._constants import GALLERY_SUFFIX
from .models import ActiveSection
from .paths import (
    RecordKind,
    contains_segments,
    is_segment_suffix,
    split_segments,
    strip_trailing_slash,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import ContentRecord

logger = logging.getLogger(__name__)

API_REQUEST_PATTERN = re.compile(r"/examples/.*/API$")
DESIGN_REQUEST_PATTERN = re.compile(r"/examples/.*/design$")

PageView = typ.Literal["gallery", "example"]


def classify_request(path: str) -> RecordKind:
    """Return the section kind requested by the normalized ``path``."""
    if API_REQUEST_PATTERN.search(path):
        return RecordKind.API_COMPANION
    if DESIGN_REQUEST_PATTERN.search(path):
        return RecordKind.DESIGN_COMPANION
    return RecordKind.PRIMARY


def find_record(
    path: str, kind: RecordKind, records: cabc.Sequence[ContentRecord]
) -> ContentRecord | None:
    """Return the record serving ``path`` for a request of ``kind``.

    Companion requests match any record whose identifier occurs as a run of
    whole segments inside ``path``; primary requests match a record whose
    identifier equals ``path`` or ends it on a segment boundary. When several
    records match, the one with the most segments wins and input order breaks
    ties. A primary ``index`` page also answers for its parent path.
    """
    if kind.is_companion:
        candidates = [r for r in records if contains_segments(r.identifier, path)]
    else:
        candidates = [
            r
            for r in records
            if is_segment_suffix(r.identifier, path)
            or (not r.is_companion and is_segment_suffix(r.root_identifier, path))
        ]
    if not candidates:
        return None
    best = max(candidates, key=lambda record: _specificity(record.identifier))
    if len(candidates) > 1:
        logger.debug(
            f"{len(candidates)} records match {path!r}; using {best.identifier!r}"
        )
    return best


def resolve_active_section(
    requested_path: str, records: cabc.Sequence[ContentRecord]
) -> ActiveSection | None:
    """Resolve ``requested_path`` to its record, section kind, and root.

    Parameters
    ----------
    requested_path : str
        URL path of the request; a single trailing slash is ignored.
    records : Sequence[ContentRecord]
        Every content record available to the site.

    Returns
    -------
    ActiveSection or None
        The routing decision, or ``None`` when no record serves the path.
    """
    path = strip_trailing_slash(requested_path)
    kind = classify_request(path)
    record = find_record(path, kind, records)
    if record is None:
        logger.debug(f"No content record matches {requested_path!r}")
        return None
    return ActiveSection(
        record=record,
        section_kind=kind,
        root_identifier=record.root_identifier,
    )


def companion_sections(
    root_identifier: str, records: cabc.Iterable[ContentRecord]
) -> dict[RecordKind, ContentRecord]:
    """Return the primary, API, and design records sharing ``root_identifier``."""
    sections: dict[RecordKind, ContentRecord] = {}
    for record in records:
        if record.root_identifier == root_identifier:
            sections.setdefault(record.kind, record)
    return sections


def is_gallery_path(path: str) -> bool:
    """Return ``True`` when ``path`` addresses the examples gallery page."""
    return strip_trailing_slash(path).endswith(GALLERY_SUFFIX)


def page_view(path: str) -> PageView:
    """Return which page layout serves ``path``."""
    return "gallery" if is_gallery_path(path) else "example"


def _specificity(identifier: str) -> int:
    return sum(1 for segment in split_segments(identifier) if segment)


__all__ = [
    "API_REQUEST_PATTERN",
    "DESIGN_REQUEST_PATTERN",
    "PageView",
    "classify_request",
    "companion_sections",
    "find_record",
    "is_gallery_path",
    "page_view",
    "resolve_active_section",
]
