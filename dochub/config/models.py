"""Typed dataclasses describing DocHub site configuration structures."""

from __future__ import annotations

import dataclasses as dc
import enum
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class FilterDepth(enum.StrEnum):
    """How far the sidebar filter descends below the root of the page tree."""

    SHALLOW = "shallow"
    ONE_LEVEL = "one-level"


@dc.dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Site-wide chrome shared by every rendered page."""

    site_name: str = "DocHub"
    tagline: str = "Master Modern Tech"
    title: str = "DocHub - Master Modern Technologies"
    description: str = ""
    cta_label: str = "Start Learning"


@dc.dataclass(frozen=True, slots=True)
class SectionConfig:
    """One documentation vertical and the conventions used to route into it.

    Attributes
    ----------
    key : str
        Section identifier, also the name of its folder in the page tree.
    title : str
        Label used in the site header and as the sidebar title.
    prefix : tuple[str, ...]
        Canonical PathKey prefix; every page of the section lives under it.
    default_key : tuple[str, ...]
        Relative key shown when the section is requested without segments.
    page_prefix : str
        Naming convention token for top-level pages shown in the sidebar.
    base_url : str
        URL under which the section's pages are served.
    description : str
        Short blurb for the homepage card.
    icon : str
        Glyph shown on the homepage card.
    topics : tuple[str, ...]
        Key topics listed on the homepage card.
    features : tuple[str, ...]
        Feature bullets listed on the homepage card.
    """

    key: str
    title: str
    prefix: tuple[str, ...]
    default_key: tuple[str, ...]
    page_prefix: str
    base_url: str
    description: str = ""
    icon: str = ""
    topics: tuple[str, ...] = ()
    features: tuple[str, ...] = ()

    def owns(self, key: tuple[str, ...]) -> bool:
        """Return whether ``key`` falls under this section's prefix."""
        return key[: len(self.prefix)] == self.prefix

    def url_for(self, key: tuple[str, ...] | None) -> str | None:
        """Return the URL serving ``key``, or None when it is outside the section."""
        if key is None or not self.owns(key):
            return None
        relative = key[len(self.prefix) :]
        if not relative:
            return None
        return f"{self.base_url}/{'/'.join(relative)}"


@dc.dataclass(frozen=True, slots=True)
class HeroSlideConfig:
    """Rotating hero slide on the landing page."""

    title: str
    subtitle: str
    description: str
    icon: str = ""


@dc.dataclass(frozen=True, slots=True)
class StatConfig:
    """Headline figure shown under the hero."""

    value: str
    label: str
    icon: str = ""


@dc.dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Selling point in the "why choose" block of the landing page."""

    title: str
    description: str
    icon: str = ""
    bullets: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class HomepageConfig:
    """Landing page copy sourced from YAML config."""

    heading: str
    lede: str
    cta_href: str
    sections_heading: str = "Choose Your Technology Path"
    sections_lede: str = ""
    slides: tuple[HeroSlideConfig, ...] = ()
    stats: tuple[StatConfig, ...] = ()
    highlights: tuple[HighlightConfig, ...] = ()


@dc.dataclass(slots=True)
class SiteConfig:
    """Collection of section configs alongside shared defaults."""

    sections: dict[str, SectionConfig]
    content_dir: Path = Path("content")
    output_dir: Path = Path("public")
    nav_depth: FilterDepth = FilterDepth.SHALLOW
    pygments_style: str = "monokai"
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    homepage: HomepageConfig | None = None

    def get_section(self, section_id: str) -> SectionConfig:
        """Return the requested section or raise ``KeyError`` naming the known ones."""
        try:
            return self.sections[section_id]
        except KeyError as exc:
            available = ", ".join(sorted(self.sections))
            msg = f"Unknown section '{section_id}'. Known sections: {available}"
            raise KeyError(msg) from exc


__all__ = [
    "FilterDepth",
    "HeroSlideConfig",
    "HighlightConfig",
    "HomepageConfig",
    "SectionConfig",
    "SiteConfig",
    "SiteConfigError",
    "StatConfig",
    "ThemeConfig",
]
