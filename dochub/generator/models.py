"""Shared dataclasses passed to the documentation templates."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class NavItem:
    """Sidebar entry derived from a filtered navigation node.

    Attributes
    ----------
    label : str
        Text shown in the sidebar.
    href : str or None
        Section URL of the node's page; ``None`` renders a plain label (folders
        without an index page, pages outside the section prefix).
    active : bool
        Whether the node is the page being rendered.
    children : list[NavItem]
        Nested entries in tree order.
    """

    label: str
    href: str | None
    active: bool = False
    children: list[NavItem] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class HeaderLink:
    """Site header link to a section's documentation."""

    label: str
    href: str
    current: bool = False


@dc.dataclass(slots=True)
class PageModel:
    """Structured page data handed to ``doc_page.jinja``.

    Attributes
    ----------
    title : str
        Page title shown in the hero and the ``<title>`` element.
    description : str
        Lede and ``<meta name="description">`` content.
    body_html : str
        Rendered Markdown body.
    toc_items : list[dict[str, str | int]]
        Entries with ``label``, ``anchor`` and ``depth``.
    full : bool
        Full-bleed layout flag; hides the TOC rail.
    url : str
        Canonical URL of the page within the section.
    """

    title: str
    description: str
    body_html: str
    toc_items: list[dict[str, str | int]]
    full: bool
    url: str


__all__ = ["HeaderLink", "NavItem", "PageModel"]
