"""Section-scoped content resolution.

Every documentation section is served by the same three functions,
parameterised by its :class:`~dochub.config.SectionConfig`:

- :func:`qualify` turns request segments into the fully-qualified store key,
  substituting the section's default key for an empty request.
- :func:`resolve` looks the key up and raises :class:`PageNotFoundError` when
  the store has nothing for it.
- :func:`section_params` lists the relative keys a static build must emit.

The resolver performs no sanitisation of its own. Segments are handed to the
store verbatim and the store only answers keys it indexed from disk, so
``..`` or empty segments simply miss.

Examples
--------
>>> from dochub.config import SectionConfig
>>> section = SectionConfig(
...     key="python", title="Python", prefix=("python",),
...     default_key=("day-0",), page_prefix="day-", base_url="/python/docs",
... )
>>> qualify(section, [])
('python', 'day-0')
>>> qualify(section, ["day-3", "variables"])
('python', 'day-3', 'variables')
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import SectionConfig
    from .content import Page, PathKey


class PageSource(typ.Protocol):
    """The lookups the resolver needs from a content store."""

    def get_page(self, key: cabc.Sequence[str]) -> Page | None: ...

    def generate_params(self) -> list[PathKey]: ...


class PageNotFoundError(LookupError):
    """Raised when a qualified key has no page in the requesting section."""

    def __init__(self, section: str, key: PathKey) -> None:
        self.section = section
        self.key = key
        super().__init__(f"No page '{'/'.join(key)}' in section '{section}'.")


def qualify(section: SectionConfig, segments: cabc.Sequence[str]) -> PathKey:
    """Return the store key for ``segments`` within ``section``."""
    relative = tuple(segments) or section.default_key
    return (*section.prefix, *relative)


def resolve(
    section: SectionConfig, segments: cabc.Sequence[str], store: PageSource
) -> Page:
    """Return the page ``segments`` address inside ``section``.

    Parameters
    ----------
    section : SectionConfig
        Section the request was routed to.
    segments : Sequence[str]
        Path segments after the section's base URL; may be empty.
    store : PageSource
        Read-only content store snapshot.

    Returns
    -------
    Page
        The stored page for ``section.prefix + segments`` (or the default key).

    Raises
    ------
    PageNotFoundError
        If the store has no page for the key, or returns one outside the
        section's prefix.
    """
    key = qualify(section, segments)
    page = store.get_page(key)
    if page is None or not section.owns(page.key):
        raise PageNotFoundError(section.key, key)
    return page


def section_params(section: SectionConfig, store: PageSource) -> list[PathKey]:
    """Return the relative keys of every page below the section prefix.

    The section's own folder page (the bare prefix) is left out because the
    empty request is reserved for the default key.
    """
    size = len(section.prefix)
    return [
        key[size:]
        for key in store.generate_params()
        if len(key) > size and section.owns(key)
    ]


__all__ = ["PageNotFoundError", "PageSource", "qualify", "resolve", "section_params"]
