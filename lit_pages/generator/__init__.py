"""Utilities for rendering, assembling, and writing literate-programming pages."""

from .builder import DocumentationBuilder, build_documentation
from .models import FileResult, PageModel, RenderSection
from .page_generator import PageGenerator, destination
from .renderer import HtmlContentRenderer

__all__ = [
    "DocumentationBuilder",
    "FileResult",
    "HtmlContentRenderer",
    "PageGenerator",
    "PageModel",
    "RenderSection",
    "build_documentation",
    "destination",
]
