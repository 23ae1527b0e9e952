"""Unit tests for menu group ordering."""

from __future__ import annotations

from example_pages.menu import group_records
from example_pages.models import ContentRecord, CuratedExample
from example_pages.ordering import resolve_order, sort_group_keys


def test_curated_groups_sort_after_offset(
    records: list[ContentRecord], curated: list[CuratedExample]
) -> None:
    """Curated groups resolve to 100 plus their list position."""
    grouped = group_records(records)
    assert resolve_order("/en/examples/bar", curated, grouped) == 100
    assert resolve_order("/en/examples/line", curated, grouped) == 101
    assert resolve_order("/zh/examples/bar", curated, grouped) == 100


def test_uncurated_group_uses_first_member_order(
    records: list[ContentRecord], curated: list[CuratedExample]
) -> None:
    grouped = group_records(records)
    assert resolve_order("/en/examples/pie", curated, grouped) == 5


def test_first_member_without_order_defaults_to_zero() -> None:
    """The first member decides even when a later member carries an order."""
    grouped = {
        "/en/examples/area": [
            ContentRecord("/en/examples/area/basic/API"),
            ContentRecord("/en/examples/area/basic", order=7),
        ]
    }
    assert resolve_order("/en/examples/area", [], grouped) == 0


def test_missing_or_empty_group_resolves_to_zero() -> None:
    assert resolve_order("/en/examples/unknown", [], {}) == 0
    assert resolve_order("/en/examples/empty", [], {"/en/examples/empty": []}) == 0


def test_authored_order_above_offset_is_not_clamped() -> None:
    """A large authored order may interleave with curated groups."""
    grouped = {"/en/examples/big": [ContentRecord("/en/examples/big/a", order=150)]}
    assert resolve_order("/en/examples/big", [], grouped) == 150


def test_sort_group_keys_is_stable_for_ties() -> None:
    grouped = {
        "/en/examples/b": [ContentRecord("/en/examples/b/x", order=1)],
        "/en/examples/a": [ContentRecord("/en/examples/a/x", order=1)],
        "/en/examples/c": [ContentRecord("/en/examples/c/x")],
    }
    curated = [CuratedExample(slug="c")]
    ordered = sort_group_keys(list(grouped), curated, grouped)
    assert ordered == ["/en/examples/b", "/en/examples/a", "/en/examples/c"]
