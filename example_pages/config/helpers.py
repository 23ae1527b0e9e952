"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ

from ..models import CuratedExample
from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_locales(value: object, default_locale: str) -> list[str]:
    """Return the published locales with ``default_locale`` first and no repeats."""
    if value is None:
        return [default_locale]
    if isinstance(value, str):
        value = value.split()
    if not isinstance(value, list):
        msg = "defaults.locales must be a list of locale codes."
        raise SiteConfigError(msg)
    locales = [default_locale]
    for item in value:
        code = _optional_str(item)
        if code and code not in locales:
            locales.append(code)
    return locales


def _build_localized_title(value: object, slug: str) -> dict[str, str]:
    """Return a locale-keyed title mapping for a curated example."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"Curated example '{slug}' title must be a locale mapping."
        raise SiteConfigError(msg)
    return {str(locale): str(text) for locale, text in value.items() if text}


def _build_curated_examples(payload: object) -> list[CuratedExample]:
    """Build the curated example list, rejecting duplicate or missing slugs."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        msg = "'examples' must be a list of curated example entries."
        raise SiteConfigError(msg)
    examples: list[CuratedExample] = []
    seen: set[str] = set()
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict):
            msg = f"Curated example #{index} must be a mapping."
            raise SiteConfigError(msg)
        raw: typ.Mapping[str, typ.Any] = entry
        slug = _optional_str(raw.get("slug"))
        if not slug:
            msg = f"Curated example #{index} is missing 'slug'."
            raise SiteConfigError(msg)
        if slug in seen:
            msg = f"Curated example '{slug}' is listed more than once."
            raise SiteConfigError(msg)
        seen.add(slug)
        examples.append(
            CuratedExample(
                slug=slug,
                icon=_optional_str(raw.get("icon")),
                title=_build_localized_title(raw.get("title"), slug),
            )
        )
    return examples


__all__ = [
    "_build_curated_examples",
    "_build_localized_title",
    "_normalize_locales",
    "_optional_str",
]
