"""Homepage-specific configuration builders."""

from __future__ import annotations

import typing as typ

from .helpers import _labels, _optional_str
from .models import (
    HeroSlideConfig,
    HighlightConfig,
    HomepageConfig,
    SiteConfigError,
    StatConfig,
)


def _build_homepage_config(payload: typ.Mapping[str, typ.Any]) -> HomepageConfig:
    """Build the homepage configuration from the provided payload."""
    match payload:
        case {"heading": heading, "lede": lede, **rest}:
            pass
        case dict():
            msg = "Homepage configuration requires 'heading' and 'lede'."
            raise SiteConfigError(msg)
        case _:
            msg = "Homepage configuration must be a mapping."
            raise SiteConfigError(msg)
    if not heading or not lede:
        msg = "Homepage 'heading' and 'lede' must not be empty."
        raise SiteConfigError(msg)

    return HomepageConfig(
        heading=str(heading),
        lede=str(lede),
        cta_href=_optional_str(rest.get("cta_href")) or "#sections",
        sections_heading=_optional_str(rest.get("sections_heading"))
        or "Choose Your Technology Path",
        sections_lede=_optional_str(rest.get("sections_lede")) or "",
        slides=_build_slides(rest.get("slides")),
        stats=_build_stats(rest.get("stats")),
        highlights=_build_highlights(rest.get("highlights")),
    )


def _build_slides(entries: object | None) -> tuple[HeroSlideConfig, ...]:
    """Build hero slide configurations, rejecting entries without copy."""
    slides: list[HeroSlideConfig] = []
    if not isinstance(entries, list):
        return ()
    for entry in entries:
        match entry:
            case {"title": title, "subtitle": subtitle, **rest}:
                pass
            case _:
                msg = "Homepage slides require 'title' and 'subtitle'."
                raise SiteConfigError(msg)
        slides.append(
            HeroSlideConfig(
                title=str(title),
                subtitle=str(subtitle),
                description=_optional_str(rest.get("description")) or "",
                icon=_optional_str(rest.get("icon")) or "",
            )
        )
    return tuple(slides)


def _build_stats(entries: object | None) -> tuple[StatConfig, ...]:
    """Build headline stat tiles; entries missing a value or label are skipped."""
    stats: list[StatConfig] = []
    if not isinstance(entries, list):
        return ()
    for entry in entries:
        match entry:
            case {"value": value, "label": label, **rest} if value and label:
                stats.append(
                    StatConfig(
                        value=str(value),
                        label=str(label),
                        icon=_optional_str(rest.get("icon")) or "",
                    )
                )
            case _:
                continue
    return tuple(stats)


def _build_highlights(entries: object | None) -> tuple[HighlightConfig, ...]:
    highlights: list[HighlightConfig] = []
    if not isinstance(entries, list):
        return ()
    for entry in entries:
        match entry:
            case {"title": title, "description": description, **rest}:
                pass
            case _:
                msg = "Homepage highlights require 'title' and 'description'."
                raise SiteConfigError(msg)
        highlights.append(
            HighlightConfig(
                title=str(title),
                description=str(description),
                icon=_optional_str(rest.get("icon")) or "",
                bullets=_labels(rest.get("bullets")),
            )
        )
    return tuple(highlights)


__all__ = ["_build_homepage_config"]
