"""Load and validate site configuration YAML for DocHub builds.

This subpackage parses the project's ``site.yaml`` file, merges global
defaults with per-section overrides, and produces strongly typed dataclasses
(:class:`SiteConfig`, :class:`SectionConfig`, etc.) that the content
resolver, the renderers, and the preview server consume. The primary entry
point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from dochub.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.get_section("python").base_url  # doctest: +SKIP
'/python/docs'
"""

from .loader import load_site_config
from .models import (
    FilterDepth,
    HeroSlideConfig,
    HighlightConfig,
    HomepageConfig,
    SectionConfig,
    SiteConfig,
    SiteConfigError,
    StatConfig,
    ThemeConfig,
)

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
    "load_site_config",
]
