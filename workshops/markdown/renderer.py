# workshops/markdown/renderer.py

import logging
import re
from dataclasses import dataclass

import markdown

from .config import get_markdown_config
from .extensions.outline import HeadingRecord, OutlineExtension
from .sidebar import build_sidebar

logger = logging.getLogger(__name__)

_HEADING_CONTENT_RE = re.compile(r"\A<h1[^>]*>(?P<content>.*)</h1>\s*\Z", re.DOTALL)


@dataclass(frozen=True)
class RenderedDocument:
    """Result of a single parse: the body HTML and the heading outline."""

    body_html: str
    headings: tuple[HeadingRecord, ...]

    def sidebar_html(self) -> str:
        return build_sidebar(self.headings, render_label)


def build_markdown(*extensions) -> markdown.Markdown:
    """
    Create a Markdown instance configured for workshop content.

    Instances keep per-document state (references, stashed HTML, outline), so
    a new one is built for every render.
    """
    config = get_markdown_config()
    return markdown.Markdown(
        extensions=[*config["extensions"], *extensions],
        extension_configs=config["extension_configs"],
        output_format=config["output_format"],
    )


def render_document(text: str) -> RenderedDocument:
    """
    Parse workshop markdown once, returning the body HTML and its outline.

    Args:
        text: Raw markdown text

    Returns:
        RenderedDocument with ``body_html`` and ``headings``
    """
    outline = OutlineExtension()
    md = build_markdown(outline)
    body_html = md.convert(text)

    headings = outline.outline
    logger.debug(f"Rendered {len(text)} chars of markdown with {len(headings)} headings")
    return RenderedDocument(body_html=body_html, headings=headings)


def render_markdown(text: str) -> str:
    """Render workshop markdown to the HTML document body."""
    return render_document(text).body_html


def collect_outline(text: str) -> tuple[HeadingRecord, ...]:
    """Return the (level, text) headings of a document in order."""
    return render_document(text).headings


def render_sidebar(text: str) -> str:
    """Render the scrollspy sidebar for a document."""
    return render_document(text).sidebar_html()


def render_label(text: str) -> str:
    """
    Render heading markdown to the inline HTML shown inside the heading.

    The text is rendered as a heading so that it is parsed exactly like the
    heading in the body, then the heading tag itself is dropped. The added
    closing hash is the one consumed, so text ending in "#" survives.
    """
    html = render_markdown(f"# {text} #")
    match = _HEADING_CONTENT_RE.match(html)
    if match is None:
        return html
    return match.group("content")
