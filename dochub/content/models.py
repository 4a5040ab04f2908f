"""Immutable records produced by the content store."""

from __future__ import annotations

import dataclasses as dc

PathKey = tuple[str, ...]


@dc.dataclass(frozen=True, slots=True)
class TocItem:
    """Table-of-contents entry for a heading inside a page.

    Attributes
    ----------
    title : str
        Heading text with Markdown escapes removed.
    anchor : str
        Fragment identifier matching the rendered heading ``id``.
    depth : int
        Heading level (2 for ``##``, 3 for ``###``...).
    """

    title: str
    anchor: str
    depth: int


@dc.dataclass(frozen=True, slots=True)
class Page:
    """A content record keyed by its fully-qualified path key.

    Attributes
    ----------
    key : PathKey
        Segments identifying the page, including the section prefix.
    title : str
        Page title from front matter, the first ``#`` heading, or the file stem.
    description : str
        Summary from front matter; may be empty.
    body : str
        Markdown source without front matter; rendered by the generator.
    toc : tuple[TocItem, ...]
        Headings below the title, in document order.
    full : bool
        Whether the page asks for a full-bleed layout without the TOC rail.
    source_path : str
        POSIX path of the file relative to the content root.
    """

    key: PathKey
    title: str
    description: str
    body: str
    toc: tuple[TocItem, ...] = ()
    full: bool = False
    source_path: str = ""


@dc.dataclass(frozen=True, slots=True)
class NavNode:
    """A node of the hierarchical navigation tree.

    Attributes
    ----------
    name : str
        Identifier of the node (file stem or folder name).
    title : str
        Display label.
    key : PathKey or None
        Key of the page the node links to; ``None`` for folders without an
        index page and for the tree root.
    children : tuple[NavNode, ...]
        Ordered child nodes.
    """

    name: str
    title: str
    key: PathKey | None = None
    children: tuple[NavNode, ...] = ()

    def child_names(self) -> list[str]:
        """Return the names of the direct children in order."""
        return [child.name for child in self.children]


__all__ = ["NavNode", "Page", "PathKey", "TocItem"]
