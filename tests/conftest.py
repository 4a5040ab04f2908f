"""Shared fixtures building a small two-section DocHub site on disk."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from dochub.config import SectionConfig, SiteConfig, load_site_config
from dochub.content import ContentStore

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

SITE_YAML = dedent(
    """
    defaults:
      content_dir: content
      output_dir: public
    theme:
      site_name: DocHub
      description: Learn modern technologies.
    sections:
      python:
        title: Python
        topics: [Basics, OOP]
      javascript:
        title: JavaScript
    homepage:
      heading: Welcome to DocHub
      lede: Learn things one day at a time.
      stats:
        - {value: "2", label: Technologies}
    """
).lstrip()

CONTENT_FILES: dict[str, str] = {
    "meta.yaml": "pages: [python, javascript]\n",
    "day-1.md": "---\ntitle: Shared day\n---\nShared across sections.\n",
    "python/meta.yaml": "title: Python Path\n",
    "python/day-0.md": (
        "---\n"
        "title: Python Day 0\n"
        "description: Start here.\n"
        "---\n"
        "## Setup\n"
        "Install things.\n\n"
        "See [day one](./day-1.md#loops) and [JS](../javascript/day-0.md).\n\n"
        "## Setup\n"
        "Twice on purpose.\n"
    ),
    "python/day-1.md": (
        "# Day One\n\n"
        "## Loops\n\n"
        "```python\n"
        "for i in range(3):\n"
        "    print(i)\n"
        "```\n"
    ),
    "python/day-10.md": "---\ntitle: Day Ten\nfull: true\n---\n## Wrap up\nDone.\n",
    "python/notes.md": "Plain notes.\n",
    "javascript/day-0.md": "---\ntitle: JS Day 0\n---\nHello from JavaScript.\n",
}


def write_tree(root: Path, files: cabc.Mapping[str, str]) -> None:
    """Write ``files`` (relative POSIX path to text) below ``root``."""
    for relative, text in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")


def _section(key: str = "python", **overrides: typ.Any) -> SectionConfig:
    """Return a SectionConfig using the shipped conventions unless overridden."""
    values: dict[str, typ.Any] = {
        "key": key,
        "title": key.title(),
        "prefix": (key,),
        "default_key": ("day-0",),
        "page_prefix": "day-",
        "base_url": f"/{key}/docs",
    }
    values.update(overrides)
    return SectionConfig(**values)


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Write the site config and content tree, returning their parent folder."""
    (tmp_path / "site.yaml").write_text(SITE_YAML, encoding="utf-8")
    write_tree(tmp_path / "content", CONTENT_FILES)
    return tmp_path


@pytest.fixture
def site_config(site_root: Path) -> SiteConfig:
    """Load the fixture site configuration."""
    return load_site_config(site_root / "site.yaml")


@pytest.fixture
def store(site_config: SiteConfig) -> ContentStore:
    """Index the fixture content tree."""
    return ContentStore.from_directory(site_config.content_dir)


@pytest.fixture
def make_section() -> cabc.Callable[..., SectionConfig]:
    """Return a factory for SectionConfig objects with default conventions."""
    return _section
