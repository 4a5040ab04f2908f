"""Common literal values used across dochub.

These constants keep the content conventions and output filenames in one
place so the loader, the renderers, the preview server, and the tests agree
on them.

Examples
--------
>>> from dochub import _constants
>>> _constants.DEFAULT_INDEX_KEY
('day-0',)
>>> _constants.DOCS_URL_TEMPLATE.format(section="python")
'/python/docs'
"""

from pathlib import Path

DEFAULT_INDEX_KEY: tuple[str, ...] = ("day-0",)
DEFAULT_PAGE_PREFIX = "day-"
DOCS_URL_TEMPLATE = "/{section}/docs"
CONTENT_SUFFIXES: tuple[str, ...] = (".md", ".mdx")
FOLDER_INDEX_STEM = "index"
FOLDER_META_FILENAME = "meta.yaml"
HTML_INDEX_FILENAME = "index.html"
NOT_FOUND_FILENAME = "404.html"
ASSETS_URL_PATH = "/assets"
STATIC_DIR = Path(__file__).resolve().parent / "static"
