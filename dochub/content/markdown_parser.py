r"""Split content files into front matter, title, body, and TOC metadata.

The content store calls :func:`parse_document` once per Markdown file. Front
matter is read with ruamel.yaml, the title falls back to the first level-one
heading, and TOC entries are read from the Python-Markdown ``toc`` extension
run over the body with the same heading extensions the page renderer uses, so
TOC links land on the rendered ``id`` attributes.

Example
-------
>>> from dochub.content.markdown_parser import parse_document
>>> doc = parse_document("---\ntitle: Day 1\n---\n## Setup\nBody\n", stem="day-1")
>>> doc.title, [item.anchor for item in doc.toc]
('Day 1', ['setup'])
"""

from __future__ import annotations

import dataclasses as dc
import html
import re
import typing as typ

from markdown import Markdown
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import TocItem

if typ.TYPE_CHECKING:
    import collections.abc as cabc

FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_META_PATTERN = re.compile(
    r"^([`~]{3,})[ \t]*([A-Za-z0-9_+#.-]+)?([ \t,][^\r\n]*)$", re.MULTILINE
)
LEADING_TITLE_PATTERN = re.compile(r"\A\s*#[ \t]+(.+?)[ \t#]*(?:\r?\n|\Z)")
TOC_MIN_DEPTH = 2
TOC_MAX_DEPTH = 4
# Extensions that decide heading ids; the page renderer enables the same set.
HEADING_EXTENSIONS = ("fenced_code", "tables", "sane_lists", "attr_list", "toc")


class ContentError(ValueError):
    """Raised when a content file cannot be interpreted."""


@dc.dataclass(slots=True)
class ParsedDocument:
    """Intermediate result handed back to the content store."""

    title: str
    description: str
    full: bool
    body: str
    toc: tuple[TocItem, ...]


def _clean_heading(text: str) -> str:
    """Return a cleaned heading, removing escapes and whitespace."""
    return text.replace("\\", "").strip()


def _title_from_stem(stem: str) -> str:
    return stem.replace("-", " ").replace("_", " ").strip().title() or stem


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return the front matter mapping and the remaining Markdown.

    Raises
    ------
    ContentError
        If the front matter block is not valid YAML or not a mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text
    loader = YAML(typ="safe")
    try:
        loaded = loader.load(match.group(1))
    except YAMLError as exc:
        msg = f"Invalid front matter: {exc}"
        raise ContentError(msg) from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise ContentError(msg)
    return dict(loaded), text[match.end() :]


def normalize_fenced_blocks(text: str) -> str:
    """Drop fence indentation and MDX-style fence metadata (``title="x"``)."""
    without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

    def _strip_meta(match: re.Match[str]) -> str:
        fence, language, _extras = match.groups()
        return f"{fence}{language or ''}"

    return FENCE_META_PATTERN.sub(_strip_meta, without_indent)


def _flatten_toc_tokens(
    tokens: cabc.Iterable[dict[str, typ.Any]],
) -> cabc.Iterator[dict[str, typ.Any]]:
    for token in tokens:
        yield token
        yield from _flatten_toc_tokens(token.get("children", ()))


def extract_toc(body: str) -> tuple[TocItem, ...]:
    """Collect level two to four headings as the rendered page will show them.

    The body is converted with the heading-related Markdown extensions and the
    ``toc`` extension's own tokens are read back, so inline markup, ``{#id}``
    attributes and duplicate titles yield exactly the rendered ``id`` values.
    """
    normalized = normalize_fenced_blocks(body)
    if not normalized.strip():
        return ()
    md = Markdown(
        extensions=list(HEADING_EXTENSIONS),
        extension_configs={"toc": {"toc_depth": f"{TOC_MIN_DEPTH}-{TOC_MAX_DEPTH}"}},
    )
    md.convert(normalized)
    return tuple(
        TocItem(
            title=html.unescape(token["name"]),
            anchor=token["id"],
            depth=token["level"],
        )
        for token in _flatten_toc_tokens(md.toc_tokens)  # type: ignore[attr-defined]
    )


def parse_document(text: str, *, stem: str) -> ParsedDocument:
    """Parse a Markdown content file into its page attributes.

    Parameters
    ----------
    text : str
        Raw file contents, optionally starting with a ``---`` front matter block.
    stem : str
        File stem (or folder name for index files) used as the last-resort title.

    Returns
    -------
    ParsedDocument
        Title, description, full-bleed flag, body without front matter or
        leading title heading, and TOC entries.
    """
    meta, body = split_front_matter(text)
    title = meta.get("title")
    leading = LEADING_TITLE_PATTERN.match(body)
    if leading:
        if not title:
            title = _clean_heading(leading.group(1))
        body = body[leading.end() :]
    return ParsedDocument(
        title=str(title) if title else _title_from_stem(stem),
        description=str(meta.get("description") or ""),
        full=bool(meta.get("full", False)),
        body=body.strip("\n") + "\n" if body.strip() else "",
        toc=extract_toc(body),
    )


__all__ = [
    "ContentError",
    "ParsedDocument",
    "extract_toc",
    "normalize_fenced_blocks",
    "parse_document",
    "split_front_matter",
]
