"""Flask preview server for DocHub sites.

The server renders pages on request from the same pipeline the static build
uses. Every section gets two URL rules under its ``base_url``: the bare
section URL (which resolves the section's default page) and an
arbitrary-depth ``<path:slug>`` rule. A slug is split into segments and handed
to :func:`dochub.routing.resolve`; a miss becomes an HTTP 404 rendered with
the shared not-found template.

Example
-------
>>> from pathlib import Path
>>> from dochub.config import load_site_config
>>> from dochub.content import ContentStore
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> app = create_app(site, ContentStore.from_directory(site.content_dir))  # doctest: +SKIP
>>> app.run(port=5000)  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ

from flask import Flask, abort, request

from ._constants import ASSETS_URL_PATH, STATIC_DIR
from .generator import HtmlContentRenderer, SectionSiteGenerator
from .homepage import HomePageBuilder
from .not_found_page import NotFoundPageBuilder
from .routing import PageNotFoundError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from werkzeug.exceptions import HTTPException

    from .config import SiteConfig
    from .content import ContentStore


def _split_slug(slug: str) -> list[str]:
    return [segment for segment in slug.split("/") if segment]


def create_app(
    site: SiteConfig, store: ContentStore, *, templates_dir: Path | None = None
) -> Flask:
    """Build the Flask application serving ``site`` from ``store``.

    Parameters
    ----------
    site : SiteConfig
        Parsed site configuration.
    store : ContentStore
        Content snapshot shared, read-only, by every request.
    templates_dir : Path, optional
        Override for the Jinja templates directory.

    Returns
    -------
    Flask
        Application with the homepage, one rule pair per section, static
        assets under ``/assets`` and a 404 handler.
    """
    app = Flask(
        __name__, static_folder=str(STATIC_DIR), static_url_path=ASSETS_URL_PATH
    )
    renderer = HtmlContentRenderer(site.pygments_style)
    homepage = HomePageBuilder(site, templates_dir=templates_dir)
    not_found = NotFoundPageBuilder(site, templates_dir=templates_dir)

    @app.route("/")
    def index() -> str:
        return homepage.render()

    for key, section in site.sections.items():
        generator = SectionSiteGenerator(
            site, section, store, templates_dir=templates_dir, renderer=renderer
        )
        view = _docs_view(app, generator)
        app.add_url_rule(
            f"{section.base_url}/",
            endpoint=f"docs_{key}_index",
            view_func=view,
            defaults={"slug": ""},
        )
        app.add_url_rule(
            f"{section.base_url}/<path:slug>",
            endpoint=f"docs_{key}",
            view_func=view,
        )

    @app.errorhandler(404)
    def page_not_found(_error: HTTPException) -> tuple[str, int]:
        return not_found.render(requested=request.path), 404

    return app


def _docs_view(
    app: Flask, generator: SectionSiteGenerator
) -> typ.Callable[[str], str]:
    """Return the view function serving ``generator``'s section."""

    def view(slug: str) -> str:
        try:
            return generator.render(_split_slug(slug))
        except PageNotFoundError as exc:
            app.logger.info("404 %s: %s", request.path, exc)
            abort(404)

    return view


__all__ = ["create_app"]
