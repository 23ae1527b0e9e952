"""Build the examples navigation menu from flat content records.

Records are bucketed by :func:`~example_pages.paths.normalize_group_key`,
filtered to the active locale, ordered by
:func:`~example_pages.ordering.resolve_order`, and rendered as a two-level
tree. Shallow groups (``/en/examples``) contribute their members directly;
deeper groups (``/en/examples/bar``) become collapsible sub-groups titled
from the curated list. API and design companions stay in their group for
ordering purposes but never become selectable leaves.

Example
-------
>>> from example_pages.models import ContentRecord
>>> from example_pages.menu import build_menu
>>> records = [
...     ContentRecord("/en/examples/bar/basic", title="Basic bar", order=1),
...     ContentRecord("/en/examples/bar/basic/API", title="API"),
... ]
>>> menu = build_menu(records, [], "en")
>>> [leaf.key for leaf in menu.leaves()]
['/en/examples/bar/basic']
"""

from __future__ import annotations

import typing as typ

from ._constants import FLAT_GROUP_MAX_DEPTH
from .icons import IconResolver
from .models import MenuGroup, MenuLeaf, NavigationMenu
from .ordering import find_curated, sort_group_keys
from .paths import locale_prefix, locale_relative_key, normalize_group_key, path_depth

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import ContentRecord, CuratedExample


def group_records(
    records: cabc.Iterable[ContentRecord],
) -> dict[str, list[ContentRecord]]:
    """Bucket ``records`` by group key, preserving input order within buckets."""
    grouped: dict[str, list[ContentRecord]] = {}
    for record in records:
        grouped.setdefault(normalize_group_key(record.identifier), []).append(record)
    return grouped


def expanded_keys(
    group_keys: cabc.Iterable[str], active_identifier: str | None
) -> tuple[str, ...]:
    """Return the group keys that prefix ``active_identifier``.

    The result is recomputed on every navigation, so the expanded state is a
    pure function of the active page rather than accumulated UI state.
    """
    if not active_identifier:
        return ()
    return tuple(
        key
        for key in group_keys
        if key and (active_identifier == key or active_identifier.startswith(f"{key}/"))
    )


def build_menu(
    records: cabc.Sequence[ContentRecord],
    curated: cabc.Sequence[CuratedExample],
    locale: str,
    *,
    active_identifier: str | None = None,
    icons: IconResolver | None = None,
) -> NavigationMenu:
    """Build the navigation tree for ``locale``.

    Parameters
    ----------
    records : Sequence[ContentRecord]
        Every content record, companions included.
    curated : Sequence[CuratedExample]
        Curated ordering and title list.
    locale : str
        Active locale code; only groups under ``/<locale>/`` are kept.
    active_identifier : str, optional
        Identifier of the page being viewed; drives ``open_keys`` and
        ``selected_key``.
    icons : IconResolver, optional
        Icon resolver; defaults to a resolver with the stock settings.

    Returns
    -------
    NavigationMenu
        Groups in display order with their leaves and derived view state.
    """
    resolver = icons or IconResolver()
    grouped = group_records(records)
    prefix = locale_prefix(locale)
    retained = [key for key in grouped if key.startswith(prefix)]
    ordered = sort_group_keys(retained, curated, grouped)

    groups = tuple(
        _build_group(key, grouped[key], curated, locale, resolver) for key in ordered
    )
    return NavigationMenu(
        groups=groups,
        open_keys=expanded_keys(ordered, active_identifier),
        selected_key=active_identifier,
    )


def adjacent_leaves(
    menu: NavigationMenu, identifier: str | None
) -> tuple[MenuLeaf | None, MenuLeaf | None]:
    """Return the leaves before and after ``identifier`` in display order."""
    leaves = menu.leaves()
    keys = [leaf.key for leaf in leaves]
    if identifier not in keys:
        return None, None
    index = keys.index(identifier)
    prev_leaf = leaves[index - 1] if index > 0 else None
    next_leaf = leaves[index + 1] if index + 1 < len(leaves) else None
    return prev_leaf, next_leaf


def _build_group(
    key: str,
    members: cabc.Sequence[ContentRecord],
    curated: cabc.Sequence[CuratedExample],
    locale: str,
    icons: IconResolver,
) -> MenuGroup:
    """Render one group as flat leaves or a collapsible sub-group."""
    leaves = _build_leaves(members, locale, icons)
    relative_key = locale_relative_key(key)
    if path_depth(key) <= FLAT_GROUP_MAX_DEPTH:
        return MenuGroup(key=key, label=relative_key, children=leaves)

    entry = find_curated(relative_key, curated)
    title = entry.title_for(locale) if entry else None
    return MenuGroup(
        key=key,
        label=_capitalize(title or relative_key),
        children=leaves,
        is_submenu=True,
        icon=icons.resolve(entry.icon) if entry else None,
    )


def _build_leaves(
    members: cabc.Sequence[ContentRecord], locale: str, icons: IconResolver
) -> tuple[MenuLeaf, ...]:
    """Return leaves for the primary members, ordered by authored ``order``."""
    primaries = [record for record in members if not record.is_companion]
    primaries.sort(key=lambda record: record.order or 0)
    return tuple(
        MenuLeaf(
            key=record.identifier,
            label=record.display_title(locale),
            target_identifier=record.identifier,
            icon=icons.resolve(record.icon),
        )
        for record in primaries
    )


def _capitalize(text: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    return text[:1].upper() + text[1:].lower()


__all__ = ["adjacent_leaves", "build_menu", "expanded_keys", "group_records"]
