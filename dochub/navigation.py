"""Filter the shared navigation tree down to one section's sidebar.

All sections read the same :class:`~dochub.content.NavNode` tree owned by the
content store. :func:`filter_tree` returns a new root holding only the direct
children that belong to the section: the folder its key prefix points at, and
the top-level pages following its naming convention (``day-*`` by default),
in source order. For a deeper prefix such as ``courses/python`` the ancestor
folders are kept, each reduced to the one child on the path.
Nodes are frozen and every filtered level gets a fresh children tuple, so the
source tree is never modified and concurrent sections never observe each
other's filtering.

With :attr:`FilterDepth.ONE_LEVEL` the section's own folder is rebuilt too,
keeping only the children that follow the naming convention. The depth is a
site-wide setting applied to every section.

Examples
--------
>>> from dochub.config import SectionConfig
>>> from dochub.content import NavNode
>>> tree = NavNode("", "", children=tuple(
...     NavNode(name, name) for name in
...     ["devops", "day-1", "javascript", "day-2", "python"]
... ))
>>> section = SectionConfig(
...     key="javascript", title="JavaScript", prefix=("javascript",),
...     default_key=("day-0",), page_prefix="day-", base_url="/javascript/docs",
... )
>>> filter_tree(tree, section).child_names()
['day-1', 'javascript', 'day-2']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .config.models import FilterDepth

if typ.TYPE_CHECKING:
    from .config import SectionConfig
    from .content import NavNode, PathKey


def _follows_convention(node: NavNode, section: SectionConfig) -> bool:
    return bool(section.page_prefix) and node.name.startswith(section.page_prefix)


def _section_branch(
    node: NavNode,
    path: PathKey,
    section: SectionConfig,
    depth: FilterDepth,
) -> NavNode | None:
    """Return ``node`` pruned to the chain of folders leading to ``path``.

    The last folder on the path is the section's own folder; ancestors keep
    only the child on the path. None when the path does not exist.
    """
    if node.name != path[0]:
        return None
    if len(path) == 1:
        if depth is FilterDepth.ONE_LEVEL:
            return dc.replace(
                node,
                children=tuple(
                    child
                    for child in node.children
                    if _follows_convention(child, section)
                ),
            )
        return node
    for child in node.children:
        branch = _section_branch(child, path[1:], section, depth)
        if branch is not None:
            return dc.replace(node, children=(branch,))
    return None


def filter_tree(
    tree: NavNode,
    section: SectionConfig,
    *,
    depth: FilterDepth = FilterDepth.SHALLOW,
) -> NavNode:
    """Return a copy of ``tree`` restricted to ``section``.

    Parameters
    ----------
    tree : NavNode
        Root of the full navigation tree; left untouched.
    section : SectionConfig
        Section whose sidebar is being built.
    depth : FilterDepth, optional
        ``SHALLOW`` keeps the section folder whole; ``ONE_LEVEL`` also drops
        the section folder's children that do not follow the naming
        convention.

    Returns
    -------
    NavNode
        New root with the same name, title and key as ``tree`` and a children
        tuple preserving source order. Empty when nothing matches.
    """
    kept: list[NavNode] = []
    for child in tree.children:
        if section.prefix and child.name == section.prefix[0]:
            branch = _section_branch(child, section.prefix, section, depth)
            if branch is not None:
                kept.append(branch)
                continue
        if _follows_convention(child, section):
            kept.append(child)
    return dc.replace(tree, children=tuple(kept))


__all__ = ["FilterDepth", "filter_tree"]
