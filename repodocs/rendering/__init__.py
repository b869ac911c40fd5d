"""Rendering of pages, navigation manifests and site configuration."""

from .pages import escape_markdown, markdown_table, page
from .templates import TemplateRenderer
from .toc import render_toc

__all__ = ["TemplateRenderer", "escape_markdown", "markdown_table", "page", "render_toc"]
