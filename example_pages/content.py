"""Load content records and gallery demos from disk.

Markdown files under the content root become :class:`ContentRecord` objects.
Each file may open with a YAML front matter block (``---`` fenced) providing
``title``, ``order``, ``icon``, and optionally an explicit ``slug``. Without a
slug the identifier is the file path relative to the root, minus its suffix,
so ``en/examples/bar/basic/API.md`` becomes ``/en/examples/bar/basic/API``
and ``en/examples/bar/basic/index.md`` becomes ``/en/examples/bar/basic``.
Bodies are rendered to HTML once here; the engine treats them as opaque.

Gallery demos are listed in a YAML file as a sequence of mappings using the
``relativePath``/``postFrontmatter`` keys the site tooling emits.

Examples
--------
>>> from pathlib import Path
>>> from example_pages.content import load_content_records
>>> records = load_content_records(Path("content"))  # doctest: +SKIP
>>> records[0].identifier  # doctest: +SKIP
'/en/examples/bar/basic'
"""

from __future__ import annotations

import io
import logging
import re
import typing as typ

from markdown import markdown
from ruamel.yaml import YAML

from ._constants import INDEX_SEGMENT
from .config.helpers import _optional_str
from .models import ContentRecord, DemoFrontmatter, DemoRecord

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(r"\A---\s*\n(.*?)\n---\s*(?:\n|\Z)", re.DOTALL)
MARKDOWN_SUFFIXES = (".md", ".markdown")


class ContentError(ValueError):
    """Raised when content files or demo listings are malformed."""


def _yaml_loader() -> YAML:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    return loader


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return the parsed front matter mapping and the remaining body."""
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text
    loaded = _yaml_loader().load(io.StringIO(match.group(1))) or {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise ContentError(msg)
    return dict(loaded), text[match.end() :]


def identifier_for(relative: Path) -> str:
    """Return the identifier derived from a content-relative file path.

    A trailing ``index`` stem names its directory, so ``bar/basic/index.md``
    and ``bar/basic.md`` both become ``/bar/basic``.
    """
    stem = relative.with_suffix("")
    if stem.name == INDEX_SEGMENT and len(stem.parts) > 1:
        stem = stem.parent
    return "/" + stem.as_posix()


def load_content_records(content_dir: Path) -> list[ContentRecord]:
    """Load every markdown file below ``content_dir`` as a content record.

    Parameters
    ----------
    content_dir : Path
        Root of the content tree.

    Returns
    -------
    list[ContentRecord]
        Records sorted by source path, so repeated loads yield the same order.

    Raises
    ------
    FileNotFoundError
        If ``content_dir`` does not exist.
    ContentError
        If front matter is malformed or two files resolve to one identifier.
    """
    if not content_dir.is_dir():
        msg = f"Content directory '{content_dir}' not found."
        raise FileNotFoundError(msg)

    records: list[ContentRecord] = []
    seen: dict[str, str] = {}
    for path in sorted(content_dir.rglob("*")):
        if path.suffix not in MARKDOWN_SUFFIXES or not path.is_file():
            continue
        relative = path.relative_to(content_dir)
        if any(part.startswith((".", "_")) for part in relative.parts):
            continue
        try:
            record = _build_record(path.read_text(encoding="utf-8"), relative)
        except ContentError as exc:
            msg = f"{relative.as_posix()}: {exc}"
            raise ContentError(msg) from exc
        previous = seen.get(record.identifier)
        if previous is not None:
            msg = (
                f"Identifier '{record.identifier}' is defined by both "
                f"'{previous}' and '{relative.as_posix()}'."
            )
            raise ContentError(msg)
        seen[record.identifier] = relative.as_posix()
        records.append(record)
    logger.info(f"Loaded {len(records)} content records from {content_dir}")
    return records


def _build_record(text: str, relative: Path) -> ContentRecord:
    front_matter, body = split_front_matter(text)
    slug = front_matter.get("slug")
    identifier = str(slug) if slug else identifier_for(relative)
    return ContentRecord(
        identifier=identifier,
        title=_parse_title(front_matter.get("title")),
        order=_optional_int(front_matter.get("order"), "order"),
        icon=_optional_str(front_matter.get("icon")),
        raw_body=markdown(body, extensions=["tables", "fenced_code"], output_format="html5"),
        relative_path=relative.as_posix(),
    )


def load_demos(path: Path) -> list[DemoRecord]:
    """Load gallery demos from the YAML listing at ``path``.

    Returns an empty list when the file does not exist, since a site without
    a gallery has nothing to list.

    Raises
    ------
    ContentError
        If the listing is not a sequence of mappings with ``relativePath``.
    """
    if not path.exists():
        return []
    with path.open("r", encoding="utf-8") as handle:
        loaded = _yaml_loader().load(handle) or []
    if not isinstance(loaded, list):
        msg = f"Demo listing '{path}' must be a sequence."
        raise ContentError(msg)
    demos = [_build_demo(entry, index) for index, entry in enumerate(loaded)]
    logger.info(f"Loaded {len(demos)} demos from {path}")
    return demos


def _build_demo(entry: object, index: int) -> DemoRecord:
    match entry:
        case {"relativePath": str() as relative_path, **rest}:
            pass
        case _:
            msg = f"Demo #{index} must be a mapping with a 'relativePath' string."
            raise ContentError(msg)
    post_raw = rest.get("postFrontmatter") or {}
    if not isinstance(post_raw, dict):
        msg = f"Demo '{relative_path}' has a non-mapping 'postFrontmatter'."
        raise ContentError(msg)
    post_frontmatter: dict[str, DemoFrontmatter] = {}
    for locale, payload in post_raw.items():
        if not isinstance(payload, dict):
            continue
        post_frontmatter[str(locale)] = DemoFrontmatter(
            title=_optional_str(payload.get("title")),
            order=_optional_int(payload.get("order"), "postFrontmatter.order"),
        )
    return DemoRecord(
        relative_path=relative_path,
        title=_parse_title(rest.get("title")),
        order=_optional_int(rest.get("order"), "order"),
        screenshot=_optional_str(rest.get("screenshot")),
        filename=_optional_str(rest.get("filename")),
        post_frontmatter=post_frontmatter,
    )


def _parse_title(value: object) -> str | dict[str, str]:
    """Return a plain or locale-keyed title; anything else becomes empty."""
    if isinstance(value, dict):
        return {str(key): str(text) for key, text in value.items() if text}
    if value is None:
        return ""
    return str(value).strip()


def _optional_int(value: object | None, field: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"'{field}' must be an integer, got {value!r}."
        raise ContentError(msg)
    return value


__all__ = [
    "ContentError",
    "identifier_for",
    "load_content_records",
    "load_demos",
    "split_front_matter",
]
