"""Utility helpers shared by the DocHub configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from dochub._constants import DOCS_URL_TEMPLATE

from .models import FilterDepth, SiteConfigError, ThemeConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _str_tuple(value: object | None) -> tuple[str, ...]:
    """Normalize a scalar or list into a tuple of non-empty strings."""
    match value:
        case None:
            return ()
        case str() as text:
            return tuple(segment for segment in text.split("/") if segment)
        case list() | tuple() as items:
            return tuple(text for item in items if (text := str(item).strip()))
        case _:
            return (str(value),)


def _labels(value: object | None) -> tuple[str, ...]:
    """Return display labels from a YAML list, ignoring blanks."""
    if not isinstance(value, list):
        return ()
    return tuple(text for item in value if (text := str(item).strip()))


def _parse_depth(value: object | None) -> FilterDepth:
    """Return the FilterDepth named by ``value`` (defaults to shallow)."""
    if value is None:
        return FilterDepth.SHALLOW
    try:
        return FilterDepth(str(value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(depth.value for depth in FilterDepth)
        msg = f"Unknown nav_depth '{value}'. Expected one of: {choices}"
        raise SiteConfigError(msg) from exc


def _default_base_url(section_key: str) -> str:
    """Return the default URL prefix for the section's documentation routes."""
    return DOCS_URL_TEMPLATE.format(section=section_key)


def _normalize_base_url(value: str) -> str:
    """Ensure a base URL has a leading slash and no trailing slash."""
    trimmed = value.strip().strip("/")
    return f"/{trimmed}" if trimmed else ""


def _resolve_path(value: object, root: Path) -> Path:
    """Return ``value`` as a path, anchoring relative paths at ``root``."""
    path = Path(str(value))
    if path.is_absolute():
        return path
    return root / path


def _build_theme_config(payload: typ.Mapping[str, typ.Any] | None) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    base = ThemeConfig()
    if not payload:
        return base
    return ThemeConfig(
        site_name=payload.get("site_name", base.site_name),
        tagline=payload.get("tagline", base.tagline),
        title=payload.get("title", base.title),
        description=payload.get("description", base.description),
        cta_label=payload.get("cta_label", base.cta_label),
    )


__all__ = [
    "_build_theme_config",
    "_default_base_url",
    "_labels",
    "_normalize_base_url",
    "_optional_str",
    "_parse_depth",
    "_resolve_path",
    "_str_tuple",
]
