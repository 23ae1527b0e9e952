"""Shared fixtures describing a small examples site."""

from __future__ import annotations

import pytest

from example_pages.models import (
    ContentRecord,
    CuratedExample,
    DemoFrontmatter,
    DemoRecord,
)


@pytest.fixture
def records() -> list[ContentRecord]:
    """Return records for gallery, bar, line and pie pages in two locales."""
    return [
        ContentRecord("/en/examples/gallery", title="Gallery", order=0),
        ContentRecord("/en/examples/bar/basic", title="Basic bar", order=2),
        ContentRecord("/en/examples/bar/basic/API", title="Bar API"),
        ContentRecord("/en/examples/bar/basic/design", title="Bar design"),
        ContentRecord("/en/examples/bar/stacked", title="Stacked bar", order=1),
        ContentRecord("/en/examples/line/basic", title="Basic line", order=1),
        ContentRecord(
            "/en/examples/pie/basic",
            title={"en": "Basic pie", "zh": "饼图"},
            order=5,
            icon="pie",
        ),
        ContentRecord("/zh/examples/bar/basic", title="基础柱状图", order=1),
    ]


@pytest.fixture
def curated() -> list[CuratedExample]:
    """Return the curated list ordering bar before line."""
    return [
        CuratedExample(slug="bar", icon="bar", title={"en": "bar charts", "zh": "柱状图"}),
        CuratedExample(slug="line", icon="line", title={"en": "line charts"}),
    ]


@pytest.fixture
def demos() -> list[DemoRecord]:
    """Return demos across two titled categories and one untitled demo."""
    bar_post = {
        "en": DemoFrontmatter(title="Bar", order=2),
        "zh": DemoFrontmatter(title="柱状图", order=2),
    }
    line_post = {"en": DemoFrontmatter(title="Line", order=1)}
    return [
        DemoRecord("bar/basic/demo/stacked.ts", title="Stacked", order=2, post_frontmatter=bar_post),
        DemoRecord("bar/basic/demo/grouped.ts", title={"en": "Grouped"}, post_frontmatter=bar_post),
        DemoRecord("bar/basic/demo/simple.ts", title="Simple", order=0, post_frontmatter=bar_post),
        DemoRecord("line/basic/demo/smooth.ts", title="Smooth", screenshot="smooth.png", post_frontmatter=line_post),
        DemoRecord("misc/demo/orphan.ts", filename="orphan.ts"),
    ]
