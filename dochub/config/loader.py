"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from dochub._constants import DEFAULT_INDEX_KEY, DEFAULT_PAGE_PREFIX

from .helpers import (
    _build_theme_config,
    _default_base_url,
    _labels,
    _normalize_base_url,
    _optional_str,
    _parse_depth,
    _resolve_path,
    _str_tuple,
)
from .homepage import _build_homepage_config
from .models import SectionConfig, SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing sections and site chrome.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Relative ``content_dir`` and ``output_dir``
        values are resolved against the directory holding this file.

    Returns
    -------
    SiteConfig
        Parsed site configuration with one :class:`SectionConfig` per entry of
        the ``sections`` mapping, in declaration order.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If no sections are defined, a section has an empty default key or a
        base URL at the site root, or ``nav_depth`` names an unknown filter
        depth.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from dochub.config import load_site_config
    >>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> list(site.sections)[:2]  # doctest: +SKIP
    ['devops', 'javascript']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    root = path.parent

    section_defaults = _SectionDefaults(
        default_key=_str_tuple(defaults.get("default_key", list(DEFAULT_INDEX_KEY))),
        page_prefix=str(defaults.get("page_prefix", DEFAULT_PAGE_PREFIX)),
    )

    sections_raw = raw.get("sections") or {}
    if not sections_raw:
        msg = "No sections defined in site configuration."
        raise SiteConfigError(msg)

    sections: dict[str, SectionConfig] = {}
    for key, payload in sections_raw.items():
        match payload:
            case dict():
                sections[key] = _build_section_config(
                    key=str(key), payload=payload, defaults=section_defaults
                )
            case None:
                sections[key] = _build_section_config(
                    key=str(key), payload={}, defaults=section_defaults
                )
            case _:
                continue

    homepage_raw = raw.get("homepage")
    homepage = _build_homepage_config(homepage_raw) if homepage_raw else None

    return SiteConfig(
        sections=sections,
        content_dir=_resolve_path(defaults.get("content_dir", "content"), root),
        output_dir=_resolve_path(defaults.get("output_dir", "public"), root),
        nav_depth=_parse_depth(defaults.get("nav_depth")),
        pygments_style=str(defaults.get("pygments_style", "monokai")),
        theme=_build_theme_config(raw.get("theme")),
        homepage=homepage,
    )


@dc.dataclass(slots=True)
class _SectionDefaults:
    """Internal container for section default configuration values."""

    default_key: tuple[str, ...]
    page_prefix: str


def _build_section_config(
    *,
    key: str,
    payload: typ.Mapping[str, typ.Any],
    defaults: _SectionDefaults,
) -> SectionConfig:
    """Build a SectionConfig for a single section entry using defaults and overrides."""
    prefix = _str_tuple(payload.get("prefix")) or (key,)
    default_key = (
        _str_tuple(payload["default_key"])
        if "default_key" in payload
        else defaults.default_key
    )
    if not default_key:
        msg = f"Section '{key}' has an empty 'default_key'."
        raise SiteConfigError(msg)
    raw_base_url = payload.get("base_url")
    base_url = (
        _normalize_base_url(str(raw_base_url))
        if raw_base_url
        else _default_base_url(key)
    )
    if not base_url:
        msg = f"Section '{key}' cannot be served from the site root."
        raise SiteConfigError(msg)
    return SectionConfig(
        key=key,
        title=_optional_str(payload.get("title")) or key.replace("-", " ").title(),
        prefix=prefix,
        default_key=default_key,
        page_prefix=str(payload.get("page_prefix", defaults.page_prefix)),
        base_url=base_url,
        description=_optional_str(payload.get("description")) or "",
        icon=_optional_str(payload.get("icon")) or "",
        topics=_labels(payload.get("topics")),
        features=_labels(payload.get("features")),
    )


__all__ = ["load_site_config"]
