# workshops/markdown/slugs.py
"""
Heading text to URL fragment ids.

The same function produces the ``id`` attribute of headings in the rendered
body and the ``href`` fragments of the sidebar, so both always agree.

Example conversions:

    "Personal Website"      -> "personal-website"
    "1) Testing McTestFace" -> "1-testing-mctestface"
    "Prophet   orpheus"     -> "prophet---orpheus"

Splitting happens on every single space, so runs of spaces turn into runs of
hyphens. Ids are not made unique; two headings with the same text share an id.
"""

import re

_DISALLOWED_CHARS = re.compile(r"[^0-9A-Za-z ]")


def slugify(text: str) -> str:
    """Convert heading text to a slug usable as an HTML id."""
    text = _DISALLOWED_CHARS.sub("", text)
    return "-".join(text.lower().split(" "))
