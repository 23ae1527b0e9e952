"""Unit tests for identifier normalization helpers."""

from __future__ import annotations

import pytest

from example_pages.paths import (
    RecordKind,
    classify_identifier,
    contains_segments,
    is_segment_suffix,
    locale_relative_key,
    normalize_group_key,
    path_depth,
    strip_trailing_slash,
)


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("/en/examples/bar/basic", "/en/examples/bar"),
        ("/en/examples/bar/basic/API", "/en/examples/bar"),
        ("/en/examples/bar/basic/design", "/en/examples/bar"),
        ("/en/examples/bar/index", "/en/examples/bar"),
        ("/en/examples/bar/API", "/en/examples"),
        ("/en/examples/gallery", "/en/examples"),
    ],
)
def test_normalize_group_key(identifier: str, expected: str) -> None:
    """Companions drop two trailing segments, everything else drops one."""
    actual = normalize_group_key(identifier)
    assert actual == expected, f"expected {expected!r} for {identifier!r}, got {actual!r}"


def test_normalize_group_key_requires_exact_companion_segment() -> None:
    """A segment merely ending in 'API' is not a companion marker."""
    assert normalize_group_key("/en/examples/bar/RESTAPI") == "/en/examples/bar"


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("/en/examples/bar", "bar"),
        ("/en/examples/chart/bar/", "chart/bar"),
        ("/en/examples", ""),
        ("/en/docs/bar", ""),
        ("", ""),
    ],
)
def test_locale_relative_key(identifier: str, expected: str) -> None:
    """Keys are relative to the examples segment and empty without one."""
    assert locale_relative_key(identifier) == expected


def test_classify_identifier_tags_companions() -> None:
    """API and design identifiers share the root of their primary page."""
    api = classify_identifier("/en/examples/bar/basic/API")
    design = classify_identifier("/en/examples/bar/basic/design")
    primary = classify_identifier("/en/examples/bar/basic")

    assert api.kind is RecordKind.API_COMPANION
    assert design.kind is RecordKind.DESIGN_COMPANION
    assert primary.kind is RecordKind.PRIMARY
    assert api.root_identifier == design.root_identifier == primary.root_identifier


@pytest.mark.parametrize(
    ("identifier", "root"),
    [
        ("/en/examples/bar/index", "/en/examples/bar"),
        ("/en/examples/bar/API", "/en/examples/bar"),
        ("/en/examples/bar/indexes", "/en/examples/bar/indexes"),
        ("/index", "/index"),
    ],
)
def test_index_pages_are_rooted_at_their_parent(identifier: str, root: str) -> None:
    """A primary ``index`` page shares its parent's root with the companions."""
    info = classify_identifier(identifier)
    assert info.root_identifier == root, f"expected root {root!r}, got {info.root_identifier!r}"


def test_strip_trailing_slash_removes_only_one() -> None:
    assert strip_trailing_slash("/en/examples/") == "/en/examples"
    assert strip_trailing_slash("/en/examples//") == "/en/examples/"
    assert strip_trailing_slash("/en/examples") == "/en/examples"


def test_path_depth_counts_leading_slash() -> None:
    assert path_depth("/en/examples") == 3
    assert path_depth("/en/examples/bar") == 4


def test_is_segment_suffix_respects_boundaries() -> None:
    assert is_segment_suffix("/en/examples/bar", "/site/en/examples/bar")
    assert is_segment_suffix("/en/examples/bar", "/en/examples/bar")
    assert not is_segment_suffix("/examples/bar", "/en/examples/foobar")
    assert not is_segment_suffix("", "/en/examples/bar")


def test_contains_segments_matches_whole_segments() -> None:
    assert contains_segments("/en/examples/bar", "/site/en/examples/bar/basic/API")
    assert not contains_segments("/en/examples/bar", "/en/examples/barchart/API")
    assert not contains_segments("/", "/en/examples/bar")
