"""Derive grouping keys and record kinds from hierarchical identifiers.

Identifiers are slash-delimited paths such as ``/en/examples/bar/basic`` or
``/en/examples/bar/basic/API``. This module turns them into the keys used by
the menu builder and the section router:

* :func:`normalize_group_key` buckets siblings under a shared parent key.
* :func:`locale_relative_key` strips everything up to the ``examples``
  segment so keys line up with curated slugs.
* :func:`classify_identifier` tags a record as primary, API companion, or
  design companion once, so callers never re-run suffix tests.

Every function here is total: malformed identifiers degrade to empty keys
rather than raising.

Examples
--------
>>> from example_pages.paths import normalize_group_key, locale_relative_key
>>> normalize_group_key("/en/examples/bar/basic")
'/en/examples/bar'
>>> normalize_group_key("/en/examples/bar/basic/API")
'/en/examples/bar'
>>> locale_relative_key("/en/examples/bar")
'bar'
"""

from __future__ import annotations

import dataclasses as dc
import enum

from ._constants import API_SEGMENT, DESIGN_SEGMENT, EXAMPLES_SEGMENT, INDEX_SEGMENT

COMPANION_SEGMENTS = (API_SEGMENT, DESIGN_SEGMENT)


class RecordKind(enum.StrEnum):
    """Section a content record or request belongs to."""

    PRIMARY = "primary"
    API_COMPANION = "api-companion"
    DESIGN_COMPANION = "design-companion"

    @property
    def is_companion(self) -> bool:
        """Return ``True`` for API and design companions."""
        return self is not RecordKind.PRIMARY


_KIND_BY_SEGMENT = {
    API_SEGMENT: RecordKind.API_COMPANION,
    DESIGN_SEGMENT: RecordKind.DESIGN_COMPANION,
}


@dc.dataclass(frozen=True, slots=True)
class PathInfo:
    """Kind and root identifier derived from a single identifier.

    Attributes
    ----------
    kind : RecordKind
        Whether the identifier names a primary page or one of its companions.
    root_identifier : str
        The identifier with any trailing ``/API`` or ``/design`` removed.
    """

    kind: RecordKind
    root_identifier: str


def split_segments(identifier: str) -> list[str]:
    """Return the raw ``/``-separated segments, keeping empty ones."""
    return identifier.split("/")


def companion_kind(identifier: str) -> RecordKind:
    """Return the kind implied by the last segment of ``identifier``."""
    last = split_segments(identifier)[-1]
    return _KIND_BY_SEGMENT.get(last, RecordKind.PRIMARY)


def classify_identifier(identifier: str) -> PathInfo:
    """Tag ``identifier`` with its record kind and shared root identifier.

    A primary page named ``index`` is rooted at its parent, so
    ``/en/examples/bar/index`` shares a root with ``/en/examples/bar/API``.
    """
    kind = companion_kind(identifier)
    segments = split_segments(identifier)
    if kind.is_companion or (segments[-1] == INDEX_SEGMENT and len(segments) > 2):
        return PathInfo(kind=kind, root_identifier="/".join(segments[:-1]))
    return PathInfo(kind=kind, root_identifier=identifier)


def normalize_group_key(identifier: str) -> str:
    """Return the parent key ``identifier`` is grouped under.

    Companions drop their last two segments (the companion marker and the
    page it belongs to); every other identifier drops its last segment.
    """
    segments = split_segments(identifier)
    drop = 2 if companion_kind(identifier).is_companion else 1
    return "/".join(segments[:-drop])


def locale_relative_key(identifier: str) -> str:
    """Return the portion of ``identifier`` after its ``examples`` segment.

    Returns an empty string when the identifier has no ``examples`` segment.
    """
    segments = split_segments(identifier)
    try:
        index = segments.index(EXAMPLES_SEGMENT)
    except ValueError:
        return ""
    return "/".join(segment for segment in segments[index + 1 :] if segment)


def strip_trailing_slash(path: str) -> str:
    """Remove a single trailing slash from ``path``."""
    return path[:-1] if path.endswith("/") else path


def path_depth(key: str) -> int:
    """Return the segment count of ``key``; a leading slash counts as one."""
    return len(split_segments(key))


def locale_prefix(locale: str) -> str:
    """Return the ``/<locale>/`` prefix identifying a locale's content."""
    return f"/{locale}/"


def is_segment_suffix(candidate: str, path: str) -> bool:
    """Return ``True`` when ``candidate`` equals ``path`` or ends it on a segment boundary."""
    if candidate == path:
        return True
    if not candidate:
        return False
    if candidate.startswith("/"):
        return path.endswith(candidate)
    return path.endswith(f"/{candidate}")


def contains_segments(candidate: str, path: str) -> bool:
    """Return ``True`` when ``candidate``'s segments appear as a contiguous run in ``path``."""
    needle = [segment for segment in split_segments(candidate) if segment]
    haystack = [segment for segment in split_segments(path) if segment]
    if not needle or len(needle) > len(haystack):
        return False
    width = len(needle)
    return any(
        haystack[start : start + width] == needle
        for start in range(len(haystack) - width + 1)
    )


__all__ = [
    "COMPANION_SEGMENTS",
    "PathInfo",
    "RecordKind",
    "classify_identifier",
    "companion_kind",
    "contains_segments",
    "is_segment_suffix",
    "locale_prefix",
    "locale_relative_key",
    "normalize_group_key",
    "path_depth",
    "split_segments",
    "strip_trailing_slash",
]
