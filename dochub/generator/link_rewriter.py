"""Rewrite relative content links to the section's published URLs."""

from __future__ import annotations

import posixpath
import typing as typ
from urllib.parse import urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from dochub._constants import CONTENT_SUFFIXES, FOLDER_INDEX_STEM

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

    from dochub.config import SectionConfig
    from dochub.content import Page
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any
    SectionConfig = typ.Any
    Page = typ.Any

EXTERNAL_PREFIXES = ("http://", "https://", "mailto:", "tel:", "data:", "javascript:")


def _build_link_rewriter(section: SectionConfig, page: Page) -> Extension:
    """Return a SectionLinkExtension for links written inside ``page``."""
    return SectionLinkExtension(section, posixpath.dirname(page.source_path))


class SectionLinkExtension(Extension):
    """Point relative links between content files at their rendered pages.

    Authors link pages the way they sit on disk (``./day-2.md``,
    ``../python/day-3.mdx#loops``). The extension maps those paths to content
    keys and, when the key belongs to the current section, to the section URL
    (``/python/docs/day-3#loops``). Links to other sections, absolute URLs and
    bare fragments are left as written.
    """

    def __init__(self, section: SectionConfig, base_dir: str) -> None:
        super().__init__()
        self.section = section
        self.base_dir = base_dir

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the section-link treeprocessor on the Markdown instance."""
        processor = SectionLinkTreeprocessor(md, self.section, self.base_dir)
        md.treeprocessors.register(processor, "dochub_section_links", 15)


class SectionLinkTreeprocessor(Treeprocessor):
    """Rewrite anchors whose ``href`` names another content file."""

    def __init__(self, md: Markdown, section: SectionConfig, base_dir: str) -> None:
        super().__init__(md)
        self.section = section
        self.base_dir = base_dir

    def run(self, root: Element) -> Element:
        """Rewrite relative anchors in the parsed markdown tree."""
        for element in root.iter("a"):
            rewritten = self._rewrite(element.get("href"))
            if rewritten:
                element.set("href", rewritten)
        return root

    def _rewrite(self, target: str | None) -> str | None:
        """Return the section URL for a relative content link, or None."""
        if not target or target.lower().startswith(EXTERNAL_PREFIXES):
            return None
        if target.startswith(("#", "//", "/")) or "://" in target:
            return None
        parsed = urlsplit(target)
        if parsed.scheme or parsed.netloc or not parsed.path:
            return None

        joined = posixpath.normpath(posixpath.join(self.base_dir, parsed.path))
        if joined.startswith("..") or joined in (".", ""):
            return None
        stem, suffix = posixpath.splitext(joined)
        if suffix and suffix not in CONTENT_SUFFIXES:
            return None
        key = tuple(segment for segment in stem.split("/") if segment)
        if key and key[-1] == FOLDER_INDEX_STEM:
            key = key[:-1]

        url = self.section.url_for(key)
        if url is None:
            return None
        if parsed.query:
            url = f"{url}?{parsed.query}"
        if parsed.fragment:
            url = f"{url}#{parsed.fragment}"
        return url


__all__ = [
    "SectionLinkExtension",
    "SectionLinkTreeprocessor",
    "_build_link_rewriter",
]
