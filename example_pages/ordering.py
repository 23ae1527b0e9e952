"""Resolve the display order of menu groups.

Two sources compete: the curated ``examples`` list from the site config and
the ``order`` front matter authored on each record. Curated groups always
sort after every other group (offset by :data:`CURATED_ORDER_OFFSET`) and
among themselves by list position; everything else sorts by the authored
order of its first member.

Examples
--------
>>> from example_pages.models import ContentRecord, CuratedExample
>>> from example_pages.ordering import resolve_order
>>> curated = [CuratedExample(slug="bar"), CuratedExample(slug="line")]
>>> grouped = {"/en/examples/pie": [ContentRecord("/en/examples/pie/basic", order=3)]}
>>> resolve_order("/en/examples/line", curated, grouped)
101
>>> resolve_order("/en/examples/pie", curated, grouped)
3
"""

from __future__ import annotations

import typing as typ

from ._constants import CURATED_ORDER_OFFSET
from .paths import locale_relative_key

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import ContentRecord, CuratedExample


def curated_index(slug: str, curated: cabc.Sequence[CuratedExample]) -> int | None:
    """Return the position of ``slug`` in the curated list, or ``None``."""
    for index, entry in enumerate(curated):
        if entry.slug == slug:
            return index
    return None


def find_curated(
    slug: str, curated: cabc.Sequence[CuratedExample]
) -> CuratedExample | None:
    """Return the curated entry whose slug equals ``slug``, if any."""
    index = curated_index(slug, curated)
    return None if index is None else curated[index]


def resolve_order(
    group_key: str,
    curated: cabc.Sequence[CuratedExample],
    grouped: cabc.Mapping[str, cabc.Sequence[ContentRecord]],
) -> int:
    """Return the sort position of ``group_key``.

    Parameters
    ----------
    group_key : str
        NavGroupKey produced by :func:`~example_pages.paths.normalize_group_key`.
    curated : Sequence[CuratedExample]
        Curated ordering list from the site configuration.
    grouped : Mapping[str, Sequence[ContentRecord]]
        Records bucketed by group key.

    Returns
    -------
    int
        ``100 + index`` for curated groups, otherwise the ``order`` of the
        group's first record (``0`` when unset or when the group is empty).
    """
    index = curated_index(locale_relative_key(group_key), curated)
    if index is not None:
        return CURATED_ORDER_OFFSET + index
    members = grouped.get(group_key)
    if not members:
        return 0
    return members[0].order or 0


def sort_group_keys(
    keys: cabc.Iterable[str],
    curated: cabc.Sequence[CuratedExample],
    grouped: cabc.Mapping[str, cabc.Sequence[ContentRecord]],
) -> list[str]:
    """Return ``keys`` sorted by :func:`resolve_order`, preserving ties."""
    return sorted(keys, key=lambda key: resolve_order(key, curated, grouped))


__all__ = ["curated_index", "find_curated", "resolve_order", "sort_group_keys"]
