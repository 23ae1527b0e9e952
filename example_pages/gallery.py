"""Group gallery demos into ordered, locale-aware categories.

Demos are bucketed by the title of the post they belong to in the active
locale; demos without such a title fall into :data:`OTHER_CATEGORY`, which
always leads. Remaining categories follow the ``order`` of their first demo's
post, and demos within a category follow their own ``order`` (unset sorts as
``-1``, ahead of explicitly ordered demos).

Example
-------
>>> from example_pages.gallery import demo_slug
>>> demo_slug("bar/basic/demo/stacked.ts")
'bar/basic#stacked'
>>> demo_slug("bar/basic/index.md")
'bar/basic/index.md'
"""

from __future__ import annotations

import re
import typing as typ

from ._constants import CATEGORY_ANCHOR_TEMPLATE, OTHER_CATEGORY, SCREENSHOT_PLACEHOLDER
from .models import GalleryCard, GalleryCategory, localize

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import DemoRecord

DEMO_PATH_PATTERN = re.compile(r"/demo/(.*)\..*")
UNORDERED_DEMO = -1


def demo_slug(relative_path: str) -> str:
    """Replace a ``/demo/<name>.<ext>`` suffix with an in-page ``#<name>`` anchor."""
    return DEMO_PATH_PATTERN.sub(lambda match: f"#{match.group(1)}", relative_path)


def category_label(demo: DemoRecord, locale: str) -> str:
    """Return the gallery category ``demo`` belongs to for ``locale``."""
    frontmatter = demo.frontmatter_for(locale)
    if frontmatter is None or not frontmatter.title:
        return OTHER_CATEGORY
    return frontmatter.title


def card_title(demo: DemoRecord, locale: str) -> str:
    """Return the card title: plain title, localized title, or file name."""
    title = localize(demo.title, locale)
    if title:
        return title
    return demo.filename or demo.relative_path.rsplit("/", 1)[-1]


def group_demos(
    demos: cabc.Iterable[DemoRecord], locale: str
) -> dict[str, list[DemoRecord]]:
    """Bucket ``demos`` by category label, preserving input order."""
    grouped: dict[str, list[DemoRecord]] = {}
    for demo in demos:
        grouped.setdefault(category_label(demo, locale), []).append(demo)
    return grouped


def categorize(
    demos: cabc.Iterable[DemoRecord],
    locale: str,
    *,
    placeholder: str = SCREENSHOT_PLACEHOLDER,
) -> list[GalleryCategory]:
    """Return gallery categories for ``locale`` in display order.

    Parameters
    ----------
    demos : Iterable[DemoRecord]
        Every demo listed in the gallery.
    locale : str
        Active locale; selects post front matter, titles, and link prefixes.
    placeholder : str, optional
        Screenshot used for demos that do not provide one.

    Returns
    -------
    list[GalleryCategory]
        ``OTHER`` first, then categories by their first demo's post order.
    """
    grouped = group_demos(demos, locale)
    labels = sorted(grouped, key=lambda label: _category_sort_key(label, grouped, locale))
    return [
        GalleryCategory(
            label=label,
            anchor=CATEGORY_ANCHOR_TEMPLATE.format(label=label),
            demos=tuple(
                _build_card(demo, locale, placeholder)
                for demo in sorted(grouped[label], key=_demo_order)
            ),
        )
        for label in labels
    ]


def _category_sort_key(
    label: str, grouped: cabc.Mapping[str, cabc.Sequence[DemoRecord]], locale: str
) -> tuple[int, int]:
    if label == OTHER_CATEGORY:
        return (0, 0)
    frontmatter = grouped[label][0].frontmatter_for(locale)
    order = frontmatter.order if frontmatter and frontmatter.order is not None else 0
    return (1, order)


def _demo_order(demo: DemoRecord) -> int:
    return UNORDERED_DEMO if demo.order is None else demo.order


def _build_card(demo: DemoRecord, locale: str, placeholder: str) -> GalleryCard:
    slug = demo_slug(demo.relative_path)
    return GalleryCard(
        slug=slug,
        href=f"/{locale}/examples/{slug}",
        title=card_title(demo, locale),
        screenshot=demo.screenshot or placeholder,
    )


__all__ = [
    "DEMO_PATH_PATTERN",
    "card_title",
    "categorize",
    "category_label",
    "demo_slug",
    "group_demos",
]
