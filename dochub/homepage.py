"""DocHub landing page rendering pipeline.

This module turns the ``homepage`` block of ``config/site.yaml`` and the
configured sections into the static ``public/index.html`` artefact. Each
section becomes a technology card linking to its documentation; the hero
slides, headline stats and highlight blocks come straight from config.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from dochub.config import load_site_config
>>> builder = HomePageBuilder(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
PosixPath('public/index.html')

Templates are read from ``dochub/templates`` unless a custom directory is
provided. Side effects of :meth:`HomePageBuilder.run` are limited to writing
the rendered HTML to disk.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from ._constants import HTML_INDEX_FILENAME
from .config import HomepageConfig
from .generator.page_generator import build_environment, build_header_links

if typ.TYPE_CHECKING:
    from .config import SiteConfig


class HomePageBuilder:
    """Render the landing page from structured config data."""

    def __init__(self, site: SiteConfig, *, templates_dir: Path | None = None) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Parsed site configuration. When it has no ``homepage`` block the
            page still renders, with the theme title as heading and one card
            per section.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``dochub/templates``.
        """
        self.site = site
        self.homepage = site.homepage or HomepageConfig(
            heading=site.theme.title,
            lede=site.theme.description,
            cta_href="#sections",
        )
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("home_page.jinja")

    def render(self) -> str:
        """Return the landing page HTML."""
        context = {
            "site": self.site,
            "theme": self.site.theme,
            "homepage": self.homepage,
            "header_links": build_header_links(self.site),
            "sections": list(self.site.sections.values()),
            "html_title": self.site.theme.title,
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, output_dir: Path | None = None) -> Path:
        """Render and write ``index.html``, returning the output path."""
        output_path = (output_dir or self.site.output_dir) / HTML_INDEX_FILENAME
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


__all__ = ["HomePageBuilder"]
