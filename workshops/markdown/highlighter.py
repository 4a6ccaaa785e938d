# workshops/markdown/highlighter.py
"""Syntax highlighting for fenced code blocks, backed by Pygments."""

import logging

from django.utils.html import escape
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)


def highlight_code(language: str, code: str, css_class: str = "highlight") -> str:
    """
    Render a block of code as HTML.

    Languages Pygments knows are highlighted inside ``<div class="{css_class}">``.
    Anything else, including a missing language tag, falls back to a plain
    ``<pre><code>`` block with the code escaped.
    """
    if language:
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound:
            logger.debug(f"No lexer for fenced code language '{language}', rendering plain")
        else:
            return highlight(code, lexer, HtmlFormatter(cssclass=css_class))

    return f"<pre><code>{escape(code)}</code></pre>"
