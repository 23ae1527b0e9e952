"""Tests for loading content records and demo listings from disk."""

from __future__ import annotations

import typing as typ
from pathlib import PurePosixPath

import pytest

from example_pages.content import (
    ContentError,
    identifier_for,
    load_content_records,
    load_demos,
    split_front_matter,
)
from example_pages.menu import build_menu
from example_pages.paths import RecordKind

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write(root: Path, relative: str, text: str) -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_records_take_identifiers_from_paths(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "en/examples/bar/basic.md",
        "---\ntitle: Basic bar\norder: 2\nicon: bar\n---\n# Basic\n\nBody text.\n",
    )
    _write(tmp_path, "en/examples/bar/basic/API.md", "---\ntitle: API\n---\nOptions.\n")
    _write(tmp_path, "en/examples/_partial.md", "ignored")

    records = load_content_records(tmp_path)

    by_id = {record.identifier: record for record in records}
    assert set(by_id) == {"/en/examples/bar/basic", "/en/examples/bar/basic/API"}
    basic = by_id["/en/examples/bar/basic"]
    assert basic.title == "Basic bar"
    assert basic.order == 2
    assert basic.icon == "bar"
    assert "<h1>Basic</h1>" in basic.raw_body
    assert basic.relative_path == "en/examples/bar/basic.md"
    assert by_id["/en/examples/bar/basic/API"].kind is RecordKind.API_COMPANION


def test_front_matter_slug_and_localized_title(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "pages/pie.md",
        "---\nslug: /zh/examples/pie/basic\ntitle:\n  en: Pie\n  zh: 饼图\n---\n",
    )
    (record,) = load_content_records(tmp_path)
    assert record.identifier == "/zh/examples/pie/basic"
    assert record.display_title("zh") == "饼图"


def test_duplicate_identifiers_are_rejected(tmp_path: Path) -> None:
    _write(tmp_path, "en/examples/a.md", "---\nslug: /en/examples/x\n---\n")
    _write(tmp_path, "en/examples/b.md", "---\nslug: /en/examples/x\n---\n")
    with pytest.raises(ContentError, match="defined by both"):
        load_content_records(tmp_path)


def test_non_integer_order_is_rejected(tmp_path: Path) -> None:
    _write(tmp_path, "en/examples/a.md", "---\norder: first\n---\n")
    with pytest.raises(ContentError, match="en/examples/a.md"):
        load_content_records(tmp_path)


def test_missing_content_dir(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_content_records(tmp_path / "missing")


def test_split_front_matter_without_block() -> None:
    assert split_front_matter("# Title\n") == ({}, "# Title\n")


def test_split_front_matter_rejects_non_mapping() -> None:
    with pytest.raises(ContentError, match="mapping"):
        split_front_matter("---\n- a\n- b\n---\nbody")


def test_load_demos(tmp_path: Path) -> None:
    listing = tmp_path / "demos.yaml"
    listing.write_text(
        """
- relativePath: bar/basic/demo/stacked.ts
  title: Stacked
  order: 1
  screenshot: stacked.png
  postFrontmatter:
    en:
      title: Bar
      order: 2
- relativePath: misc/demo/orphan.ts
  filename: orphan.ts
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    stacked, orphan = load_demos(listing)
    assert stacked.title == "Stacked"
    assert stacked.order == 1
    assert stacked.frontmatter_for("en") is not None
    assert stacked.frontmatter_for("en").title == "Bar"
    assert stacked.frontmatter_for("zh") is None
    assert orphan.filename == "orphan.ts"
    assert orphan.post_frontmatter == {}


def test_load_demos_missing_file_is_empty(tmp_path: Path) -> None:
    assert load_demos(tmp_path / "absent.yaml") == []


def test_load_demos_rejects_entries_without_path(tmp_path: Path) -> None:
    listing = tmp_path / "demos.yaml"
    listing.write_text("- title: nope\n", encoding="utf-8")
    with pytest.raises(ContentError, match="relativePath"):
        load_demos(listing)


def test_index_pages_share_root_with_companions(tmp_path: Path) -> None:
    _write(tmp_path, "en/examples/bar/basic/index.md", "---\ntitle: Basic bar\n---\n")
    _write(tmp_path, "en/examples/bar/basic/API.md", "---\ntitle: API\n---\n")
    _write(tmp_path, "en/examples/bar/basic/design.md", "---\ntitle: Design\n---\n")

    records = load_content_records(tmp_path)

    by_id = {record.identifier: record for record in records}
    assert set(by_id) == {
        "/en/examples/bar/basic",
        "/en/examples/bar/basic/API",
        "/en/examples/bar/basic/design",
    }
    roots = {record.root_identifier for record in records}
    assert roots == {"/en/examples/bar/basic"}, f"expected one shared root, got {roots!r}"
    menu = build_menu(records, [], "en")
    assert [(group.key, [leaf.key for leaf in group.children]) for group in menu.groups] == [
        ("/en/examples/bar", ["/en/examples/bar/basic"])
    ]


def test_index_file_and_sibling_file_collide(tmp_path: Path) -> None:
    _write(tmp_path, "en/examples/bar.md", "")
    _write(tmp_path, "en/examples/bar/index.md", "")
    with pytest.raises(ContentError, match="defined by both"):
        load_content_records(tmp_path)


@pytest.mark.parametrize(
    ("relative", "expected"),
    [
        ("en/examples/bar/basic/index.md", "/en/examples/bar/basic"),
        ("en/examples/bar/basic.md", "/en/examples/bar/basic"),
        ("en/examples/bar/basic/API.md", "/en/examples/bar/basic/API"),
        ("index.md", "/index"),
    ],
)
def test_identifier_for(relative: str, expected: str) -> None:
    assert identifier_for(PurePosixPath(relative)) == expected
