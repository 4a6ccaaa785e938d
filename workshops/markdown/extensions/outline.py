# workshops/markdown/extensions/outline.py
"""
A Markdown extension that records the document's heading outline.

While the document is parsed, every heading (h1-h6, in document order) is
recorded as a ``HeadingRecord`` holding its level and its raw markdown text,
and receives an ``id`` derived from that raw text. The tree processor runs
before inline rendering, so the text is exactly what the author wrote between
the ``#`` marks. The sidebar slugs the same text, which keeps heading ids and
sidebar links identical.

Each extension instance belongs to exactly one ``Markdown`` instance; the
renderer builds a new one for every document.
"""

from typing import NamedTuple

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from ..slugs import slugify

_HEADING_TAGS = {f"h{i}" for i in range(1, 7)}


class HeadingRecord(NamedTuple):
    level: int
    text: str


class OutlineTreeprocessor(Treeprocessor):
    def __init__(self, md, headings: list[HeadingRecord], slug):
        super().__init__(md)
        self.headings = headings
        self.slug = slug

    def run(self, root):
        for el in root.iter():
            tag = el.tag.lower() if isinstance(el.tag, str) else ""
            if tag not in _HEADING_TAGS:
                continue
            text = el.text or ""
            self.headings.append(HeadingRecord(level=int(tag[1]), text=text))
            el.set("id", self.slug(text))


class OutlineExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {
            "slugify": [slugify, "Callable turning heading text into an id"],
        }
        super().__init__(**kwargs)
        self.headings: list[HeadingRecord] = []

    @property
    def outline(self) -> tuple[HeadingRecord, ...]:
        return tuple(self.headings)

    def extendMarkdown(self, md):
        md.registerExtension(self)
        # Inline rendering runs at priority 20
        md.treeprocessors.register(
            OutlineTreeprocessor(md, self.headings, self.getConfig("slugify")),
            "workshop_outline",
            priority=25,
        )

    def reset(self):
        self.headings.clear()


def makeExtension(**kwargs):
    return OutlineExtension(**kwargs)
