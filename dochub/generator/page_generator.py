"""Render one documentation section into themed HTML pages.

:class:`SectionSiteGenerator` is the single, section-parameterised pipeline
behind every vertical of the site. For each route of a section it resolves
the page through :func:`dochub.routing.resolve`, renders its Markdown body
with :class:`HtmlContentRenderer`, builds the sidebar from
:func:`dochub.navigation.filter_tree`, and fills ``doc_page.jinja``. The
static build writes the result to disk; the preview server calls
:meth:`SectionSiteGenerator.render` per request.

Example
-------
>>> from pathlib import Path
>>> from dochub.config import load_site_config
>>> from dochub.content import ContentStore
>>> from dochub.generator import SectionSiteGenerator
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> store = ContentStore.from_directory(site.content_dir)  # doctest: +SKIP
>>> generator = SectionSiteGenerator(site, site.get_section("python"), store)  # doctest: +SKIP
>>> generator.run()  # doctest: +SKIP
[PosixPath('public/python/docs/index.html'), ...]
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from dochub._constants import HTML_INDEX_FILENAME
from dochub.generator.link_rewriter import _build_link_rewriter
from dochub.generator.models import HeaderLink, NavItem, PageModel
from dochub.generator.renderer import HtmlContentRenderer
from dochub.navigation import filter_tree
from dochub.routing import qualify, resolve, section_params

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from dochub.config import SectionConfig, SiteConfig
    from dochub.content import ContentStore, NavNode, Page, PathKey

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return the Jinja environment shared by every DocHub template."""
    return Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def build_header_links(
    site: SiteConfig, current: str | None = None
) -> list[HeaderLink]:
    """Return the site header links, one per configured section."""
    return [
        HeaderLink(label=section.title, href=section.base_url, current=key == current)
        for key, section in site.sections.items()
    ]


class SectionSiteGenerator:
    """Resolve and render every page of one section."""

    def __init__(
        self,
        site: SiteConfig,
        section: SectionConfig,
        store: ContentStore,
        *,
        templates_dir: Path | None = None,
        renderer: HtmlContentRenderer | None = None,
    ) -> None:
        """Initialize the generator for ``section``.

        Parameters
        ----------
        site : SiteConfig
            Site configuration supplying theme, nav depth and output folder.
        section : SectionConfig
            Section whose pages are rendered.
        store : ContentStore
            Shared read-only content snapshot.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        renderer : HtmlContentRenderer, optional
            Renderer to reuse across sections; one is created from the site's
            Pygments style when omitted.
        """
        self.site = site
        self.section = section
        self.store = store
        self.renderer = renderer or HtmlContentRenderer(site.pygments_style)
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("doc_page.jinja")
        self.nav_tree = filter_tree(store.page_tree, section, depth=site.nav_depth)
        self.header_links = build_header_links(site, current=section.key)

    def routes(self) -> list[PathKey]:
        """Return the relative keys to render; ``()`` is the section index.

        The index route is listed only when the section's default page exists;
        otherwise the bare section URL is left to ``404.html``.
        """
        params = section_params(self.section, self.store)
        if self.store.get_page(qualify(self.section, ())) is None:
            return params
        return [(), *params]

    def url_for_route(self, relative: cabc.Sequence[str]) -> str:
        """Return the URL a relative route is published under."""
        if not relative:
            return f"{self.section.base_url}/"
        return f"{self.section.base_url}/{'/'.join(relative)}"

    def render(self, segments: cabc.Sequence[str]) -> str:
        """Render the page addressed by ``segments``.

        Raises
        ------
        PageNotFoundError
            If the section has no page for ``segments``.
        """
        page = resolve(self.section, segments, self.store)
        model = self._build_page_model(page, self.url_for_route(segments))
        context = {
            "site": self.site,
            "theme": self.site.theme,
            "section": self.section,
            "header_links": self.header_links,
            "nav_title": self.section.title,
            "nav_items": self._build_nav_items(self.nav_tree.children, page.key),
            "page": model,
            "html_title": self._format_page_title(page),
            "pygments_css": self.renderer.stylesheet,
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, output_dir: Path | None = None) -> list[Path]:
        """Write every route of the section below ``output_dir``.

        Returns
        -------
        list[Path]
            Paths of the written ``index.html`` files, index route first.

        Raises
        ------
        PageNotFoundError
            If a listed page vanished from the store between listing and
            rendering.
        """
        out_root = output_dir or self.site.output_dir
        written: list[Path] = []
        for relative in self.routes():
            html = self.render(relative)
            output_path = self.output_path(relative, out_root)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)
        return written

    def output_path(self, relative: cabc.Sequence[str], out_root: Path) -> Path:
        """Return the file a route is written to."""
        url = self.url_for_route(relative).strip("/")
        return out_root.joinpath(*url.split("/"), HTML_INDEX_FILENAME)

    def _build_page_model(self, page: Page, url: str) -> PageModel:
        body_html = self.renderer.markdown(
            page.body, extensions=[_build_link_rewriter(self.section, page)]
        )
        return PageModel(
            title=page.title,
            description=page.description,
            body_html=body_html,
            toc_items=[
                {"label": item.title, "anchor": item.anchor, "depth": item.depth}
                for item in page.toc
            ],
            full=page.full,
            url=url,
        )

    def _build_nav_items(
        self, nodes: cabc.Sequence[NavNode], current: PathKey
    ) -> list[NavItem]:
        """Convert filtered nav nodes into template entries, marking ``current``."""
        return [
            NavItem(
                label=node.title,
                href=self.section.url_for(node.key),
                active=node.key == current,
                children=self._build_nav_items(node.children, current),
            )
            for node in nodes
        ]

    def _format_page_title(self, page: Page) -> str:
        """Compose the HTML title from the page, section and site names."""
        return f"{page.title} | {self.section.title} | {self.site.theme.site_name}"


__all__ = [
    "DEFAULT_TEMPLATES_DIR",
    "SectionSiteGenerator",
    "build_environment",
    "build_header_links",
]
