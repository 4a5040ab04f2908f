"""Cyclopts CLI entrypoint for building and previewing DocHub sites.

The ``dochub`` console script defined here renders the static site from the
content directory (``dochub build``), lists the URLs a build publishes
(``dochub routes``), and runs the Flask preview server (``dochub serve``).
Every option can also be supplied through an ``INPUT_*`` environment
variable, which keeps CI invocations short.

Examples
--------
Build every section with the default configuration:

>>> from dochub.cli import main
>>> main()  # doctest: +SKIP

Rebuild a single section into a custom directory:

>>> from dochub.cli import app
>>> app(["build", "--section", "python", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import shutil
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import ASSETS_URL_PATH, STATIC_DIR
from .config import load_site_config
from .content import ContentStore
from .generator import HtmlContentRenderer, SectionSiteGenerator
from .homepage import HomePageBuilder
from .not_found_page import NotFoundPageBuilder
from .server import create_app

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="dochub", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _copy_assets(output_dir: Path) -> list[Path]:
    """Copy the packaged stylesheet and friends into ``output_dir/assets``."""
    target_dir = output_dir / ASSETS_URL_PATH.strip("/")
    target_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for asset in sorted(STATIC_DIR.iterdir()):
        if asset.is_file():
            target = target_dir / asset.name
            shutil.copyfile(asset, target)
            written.append(target)
    return written


@app.command(help="Render the homepage, the 404 page and every section to HTML.")
def build(
    *,
    section: typ.Annotated[
        str | None, Parameter(help="Section identifier", env_var="INPUT_SECTION")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Build the static site described by ``config``.

    Parameters
    ----------
    section : str or None, optional
        Section key to render; when ``None`` (default) every section is
        rendered. The homepage, 404 page and assets are always written.
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override for the configured output directory.

    Returns
    -------
    None
        Writes rendered artefacts and prints the generated paths.

    Raises
    ------
    KeyError
        If ``section`` names a section missing from the configuration.
    PageNotFoundError
        If a page listed by the content store cannot be resolved.
    """
    site_config = load_site_config(config)
    out_dir = output_dir or site_config.output_dir
    store = ContentStore.from_directory(site_config.content_dir)

    if section:
        target_sections = [site_config.get_section(section)]
    else:
        target_sections = list(site_config.sections.values())

    renderer = HtmlContentRenderer(site_config.pygments_style)
    written: list[Path] = []
    for section_config in target_sections:
        generator = SectionSiteGenerator(
            site_config, section_config, store, renderer=renderer
        )
        written.extend(generator.run(out_dir))
    written.append(HomePageBuilder(site_config).run(out_dir))
    written.append(NotFoundPageBuilder(site_config).run(out_dir))
    written.extend(_copy_assets(out_dir))
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="List the URLs a static build would publish.")
def routes(
    *,
    section: typ.Annotated[
        str | None, Parameter(help="Section identifier", env_var="INPUT_SECTION")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print one URL per line for the selected sections."""
    site_config = load_site_config(config)
    store = ContentStore.from_directory(site_config.content_dir)
    if section:
        target_sections = [site_config.get_section(section)]
    else:
        target_sections = list(site_config.sections.values())
    for section_config in target_sections:
        generator = SectionSiteGenerator(site_config, section_config, store)
        for relative in generator.routes():
            print(generator.url_for_route(relative))


@app.command(help="Serve the site with the Flask preview server.")
def serve(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    host: typ.Annotated[
        str, Parameter(help="Interface to bind", env_var="INPUT_HOST")
    ] = "127.0.0.1",
    port: typ.Annotated[
        int, Parameter(help="Port to listen on", env_var="INPUT_PORT")
    ] = 5000,
    debug: typ.Annotated[
        bool, Parameter(help="Enable the Flask debugger and reloader")
    ] = False,
) -> None:
    """Load config and content once, then serve pages until interrupted."""
    site_config = load_site_config(config)
    store = ContentStore.from_directory(site_config.content_dir)
    create_app(site_config, store).run(host=host, port=port, debug=debug)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``dochub`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
