"""DocHub "page not found" rendering."""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from ._constants import NOT_FOUND_FILENAME
from .generator.page_generator import build_environment, build_header_links

if typ.TYPE_CHECKING:
    from .config import SiteConfig


class NotFoundPageBuilder:
    """Render the 404 page shared by the static build and the preview server."""

    def __init__(self, site: SiteConfig, *, templates_dir: Path | None = None) -> None:
        """Initialize the builder and Jinja environment."""
        self.site = site
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("not_found.jinja")

    def render(self, *, requested: str | None = None) -> str:
        """Return the 404 HTML, optionally echoing the requested path."""
        context = {
            "site": self.site,
            "theme": self.site.theme,
            "header_links": build_header_links(self.site),
            "requested": requested,
            "html_title": f"Page not found | {self.site.theme.site_name}",
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, output_dir: Path | None = None) -> Path:
        """Render and write ``404.html``, returning the output path."""
        output_path = (output_dir or self.site.output_dir) / NOT_FOUND_FILENAME
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


__all__ = ["NotFoundPageBuilder"]
