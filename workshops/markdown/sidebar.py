# workshops/markdown/sidebar.py
"""
Sidebar navigation built from a document's heading outline, for use with
Bootstrap scrollspy.

Example output:

<nav class="workshop-sidebar hidden-print hidden-xs hidden-sm affix">
  <ul id="sidebar" class="nav nav-stacked fixed">
    <li>
      <a href="#part-i-setup">Part I: Setup</a>
      <ul class="nav nav-stacked">
        <li><a href="#1-signing-up-for-github">1) Signing Up for GitHub</a></li>
        <li><a href="#2-creating-your-first-github-repository">2) Creating Your First GitHub Repository</a></li>
      </ul>
    </li>
    <li>
      <!-- And so on -->
    </li>
  </ul>
</nav>

Only h2 (sections) and h3 (their entries) are shown. Every other level is
skipped, as is an h3 that appears before the first h2.
"""

from typing import Callable, Iterable

from .extensions.outline import HeadingRecord
from .slugs import slugify

PARENT_LEVEL = 2
CHILD_LEVEL = 3

SIDEBAR_OPEN = (
    '<nav class="workshop-sidebar hidden-print hidden-xs hidden-sm affix">\n'
    '  <ul id="sidebar" class="nav nav-stacked fixed">\n'
)
SIDEBAR_CLOSE = "  </ul>\n</nav>"


def build_sidebar(
    outline: Iterable[HeadingRecord],
    render_label: Callable[[str], str],
    slug: Callable[[str], str] = slugify,
) -> str:
    """
    Render the sidebar for an outline of (level, text) headings.

    ``render_label`` turns a heading's markdown into inline HTML. Its output is
    placed inside the link without escaping, so it must only ever see trusted
    heading text.
    """

    def nav_link(text: str) -> str:
        return f'<a href="#{slug(text)}">{render_label(text).strip()}</a>'

    in_section = False
    section_has_children = False
    parts = [SIDEBAR_OPEN]

    for level, text in outline:
        if not in_section and level == PARENT_LEVEL:
            parts.append(f"    <li>\n      {nav_link(text)}\n")
            in_section = True
        elif in_section and level == CHILD_LEVEL:
            if not section_has_children:
                parts.append('      <ul class="nav nav-stacked">\n')
                section_has_children = True
            parts.append(f"        <li>{nav_link(text)}</li>\n")
        elif in_section and level == PARENT_LEVEL:
            if section_has_children:
                parts.append("      </ul>\n")
                section_has_children = False
            parts.append(f"    </li>\n    <li>\n      {nav_link(text)}\n")

    if in_section:
        if section_has_children:
            parts.append("      </ul>\n")
        parts.append("    </li>\n")

    parts.append(SIDEBAR_CLOSE)
    return "".join(parts)
