"""Content loading: pages, navigation tree, and the store that owns them."""

from .markdown_parser import ContentError
from .models import NavNode, Page, PathKey, TocItem
from .store import ContentStore

__all__ = ["ContentError", "ContentStore", "NavNode", "Page", "PathKey", "TocItem"]
