"""Utilities for rendering DocHub section pages to HTML."""

from .link_rewriter import SectionLinkExtension
from .models import HeaderLink, NavItem, PageModel
from .page_generator import SectionSiteGenerator, build_environment
from .renderer import HtmlContentRenderer

__all__ = [
    "HeaderLink",
    "HtmlContentRenderer",
    "NavItem",
    "PageModel",
    "SectionLinkExtension",
    "SectionSiteGenerator",
    "build_environment",
]
