"""File-based content store backing every documentation section.

:class:`ContentStore` walks a content directory once, turning each Markdown
file into an immutable :class:`~dochub.content.models.Page` keyed by its
relative path and assembling a :class:`~dochub.content.models.NavNode` tree
that mirrors the folder layout. Sections never own a store of their own: they
share one snapshot and carve out their slice by key prefix (see
:mod:`dochub.routing`) and by name (see :mod:`dochub.navigation`).

Layout conventions
------------------
- ``python/day-1.md`` becomes the page ``("python", "day-1")``.
- ``python/index.md`` becomes the folder page ``("python",)``.
- ``python/meta.yaml`` may define ``title`` and a ``pages`` list that fixes
  the order of the folder's entries; unlisted entries follow in natural order
  (``day-2`` sorts before ``day-10``).

Example
-------
>>> from pathlib import Path
>>> from dochub.content import ContentStore
>>> store = ContentStore.from_directory(Path("content"))  # doctest: +SKIP
>>> store.get_page(("python", "day-0")).title  # doctest: +SKIP
'Day 0: Getting Started'
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from dochub._constants import (
    CONTENT_SUFFIXES,
    FOLDER_INDEX_STEM,
    FOLDER_META_FILENAME,
)

from .markdown_parser import ContentError, parse_document
from .models import NavNode, Page, PathKey

if typ.TYPE_CHECKING:
    import collections.abc as cabc

NATURAL_CHUNK_PATTERN = re.compile(r"(\d+)")


def _natural_key(name: str) -> tuple[tuple[int, int | str], ...]:
    """Return a sort key comparing digit runs numerically."""
    return tuple(
        (0, int(chunk)) if chunk.isdigit() else (1, chunk.lower())
        for chunk in NATURAL_CHUNK_PATTERN.split(name)
        if chunk
    )


def _title_from_name(name: str) -> str:
    return name.replace("-", " ").replace("_", " ").strip().title() or name


class ContentStore:
    """Read-only index of pages and the navigation tree built from disk."""

    def __init__(self, pages: cabc.Mapping[PathKey, Page], tree: NavNode) -> None:
        """Wrap an already-built page index and navigation tree.

        Parameters
        ----------
        pages : Mapping[PathKey, Page]
            Pages keyed by their fully-qualified path key.
        tree : NavNode
            Root of the unfiltered navigation tree.
        """
        self._pages: dict[PathKey, Page] = dict(pages)
        self._tree = tree

    @classmethod
    def from_directory(cls, root: Path) -> ContentStore:
        """Index every Markdown file below ``root``.

        Raises
        ------
        FileNotFoundError
            If ``root`` is not a directory.
        ContentError
            If a file carries malformed front matter, a folder has an
            invalid ``meta.yaml``, or two entries map to the same key
            (``python.md`` beside a ``python/`` folder).
        """
        if not root.is_dir():
            msg = f"Content directory '{root}' not found."
            raise FileNotFoundError(msg)
        pages: dict[PathKey, Page] = {}
        tree = _StoreBuilder(root, pages).build()
        return cls(pages, tree)

    @property
    def page_tree(self) -> NavNode:
        """Return the root of the full, unfiltered navigation tree."""
        return self._tree

    def get_page(self, key: cabc.Sequence[str]) -> Page | None:
        """Return the page stored under ``key`` or None."""
        return self._pages.get(tuple(key))

    def generate_params(self) -> list[PathKey]:
        """Return every stored page key, in navigation order."""
        return list(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, tuple) and key in self._pages


class _StoreBuilder:
    """Recursive directory walker filling the page index as it goes."""

    def __init__(self, root: Path, pages: dict[PathKey, Page]) -> None:
        self.root = root
        self.pages = pages
        self._yaml = YAML(typ="safe")

    def build(self) -> NavNode:
        """Walk the whole content root and return the navigation tree."""
        children = self.walk(self.root, (), self._read_meta(self.root))
        return NavNode(name="", title="", key=None, children=children)

    def walk(
        self, folder: Path, prefix: PathKey, meta: cabc.Mapping[str, typ.Any]
    ) -> tuple[NavNode, ...]:
        """Return the nav nodes for ``folder``'s entries, recording pages."""
        entries: dict[str, Path] = {}
        for path in sorted(folder.iterdir()):
            if path.name.startswith("."):
                continue
            if path.is_dir():
                name = path.name
            elif path.suffix in CONTENT_SUFFIXES and path.stem != FOLDER_INDEX_STEM:
                name = path.stem
            else:
                continue
            if name in entries:
                msg = (
                    f"{self._relative(entries[name])} and {self._relative(path)} "
                    f"both map to '{'/'.join((*prefix, name))}'."
                )
                raise ContentError(msg)
            entries[name] = path

        nodes: list[NavNode] = []
        for name in self._ordered_names(meta, entries):
            path = entries[name]
            key = (*prefix, name)
            if path.is_dir():
                nodes.append(self._folder_node(path, key))
            else:
                page = self._load_page(path, key)
                nodes.append(NavNode(name=name, title=page.title, key=key))
        return tuple(nodes)

    def _relative(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    def _folder_node(self, folder: Path, key: PathKey) -> NavNode:
        index_page = self._load_folder_index(folder, key)
        meta = self._read_meta(folder)
        children = self.walk(folder, key, meta)
        title = meta.get("title") or (
            index_page.title if index_page else _title_from_name(folder.name)
        )
        return NavNode(
            name=folder.name,
            title=str(title),
            key=key if index_page else None,
            children=children,
        )

    def _load_folder_index(self, folder: Path, key: PathKey) -> Page | None:
        candidates = [
            path
            for suffix in CONTENT_SUFFIXES
            if (path := folder / f"{FOLDER_INDEX_STEM}{suffix}").is_file()
        ]
        if len(candidates) > 1:
            names = " and ".join(self._relative(path) for path in candidates)
            msg = f"{names} both map to '{'/'.join(key)}'."
            raise ContentError(msg)
        if not candidates:
            return None
        return self._load_page(candidates[0], key, stem=folder.name)

    def _load_page(self, path: Path, key: PathKey, *, stem: str | None = None) -> Page:
        relative = self._relative(path)
        try:
            parsed = parse_document(
                path.read_text(encoding="utf-8"), stem=stem or path.stem
            )
        except ContentError as exc:
            msg = f"{relative}: {exc}"
            raise ContentError(msg) from exc
        page = Page(
            key=key,
            title=parsed.title,
            description=parsed.description,
            body=parsed.body,
            toc=parsed.toc,
            full=parsed.full,
            source_path=relative,
        )
        self.pages[key] = page
        return page

    def _read_meta(self, folder: Path) -> dict[str, typ.Any]:
        meta_path = folder / FOLDER_META_FILENAME
        if not meta_path.is_file():
            return {}
        try:
            with meta_path.open("r", encoding="utf-8") as handle:
                loaded = self._yaml.load(handle) or {}
        except YAMLError as exc:
            msg = f"{self._relative(meta_path)}: {exc}"
            raise ContentError(msg) from exc
        if not isinstance(loaded, dict):
            msg = f"{self._relative(meta_path)} must be a mapping."
            raise ContentError(msg)
        return dict(loaded)

    @staticmethod
    def _ordered_names(
        meta: cabc.Mapping[str, typ.Any], entries: dict[str, Path]
    ) -> list[str]:
        """Return entry names in ``meta.yaml`` order, then natural order."""
        declared = meta.get("pages") or []
        ordered: list[str] = []
        for name in declared:
            text = str(name)
            if text in entries and text not in ordered:
                ordered.append(text)
        remaining = sorted(
            (name for name in entries if name not in ordered), key=_natural_key
        )
        return ordered + remaining


__all__ = ["ContentStore"]
