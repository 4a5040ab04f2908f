"""Build and serve the DocHub multi-section documentation site.

This package exposes the CLI entry points used by ``dochub build`` and
``dochub serve`` together with the two operations every section route is
made of: resolving request segments to a page and filtering the shared
navigation tree down to one section.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``resolve``: Section-scoped page lookup raising ``PageNotFoundError``.
- ``filter_tree``: Section-scoped navigation tree filter.

Examples
--------
>>> from dochub import main
>>> main()  # doctest: +SKIP
>>> from dochub import app
>>> app.name  # doctest: +SKIP
('dochub',)
"""

from __future__ import annotations

from .cli import app, main
from .navigation import filter_tree
from .routing import PageNotFoundError, resolve

__all__ = ["PageNotFoundError", "app", "filter_tree", "main", "resolve"]
