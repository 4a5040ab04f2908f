"""Render page bodies to HTML with syntax-highlighted code blocks."""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from dochub.content.markdown_parser import HEADING_EXTENSIONS, normalize_fenced_blocks

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


class HtmlContentRenderer:
    """Render Markdown page bodies with consistent code styling."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer with the Pygments style used for code blocks."""
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(
        self, text: str, *, extensions: typ.Sequence[Extension] = ()
    ) -> str:
        """Render ``text`` into HTML.

        Parameters
        ----------
        text : str
            Markdown body of a page.
        extensions : Sequence[Extension], optional
            Extra per-page extensions, such as the section link rewriter.

        Returns
        -------
        str
            HTML fragment; headings carry the ``id`` attributes the page TOC
            links to. Empty when ``text`` is blank.
        """
        normalized = normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        enabled: list[Extension | str] = [
            *HEADING_EXTENSIONS,
            "codehilite",
            *extensions,
        ]
        md = Markdown(
            extensions=enabled,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                },
            },
        )
        html = md.convert(normalized)
        return self._annotate_codehilite(html, normalized)

    def _annotate_codehilite(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, count=len(languages))


__all__ = ["CODE_BLOCK_PATTERN", "HtmlContentRenderer"]
