"""
Markdown rendering for workshop pages: the document body and its scrollspy
sidebar.
"""

from .renderer import (
    RenderedDocument,
    collect_outline,
    render_document,
    render_label,
    render_markdown,
    render_sidebar,
)
from .sidebar import build_sidebar
from .slugs import slugify

__all__ = [
    'RenderedDocument',
    'build_sidebar',
    'collect_outline',
    'render_document',
    'render_label',
    'render_markdown',
    'render_sidebar',
    'slugify',
]
