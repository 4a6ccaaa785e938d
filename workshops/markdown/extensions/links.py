# workshops/markdown/extensions/links.py
"""
A Markdown extension that applies the workshop link policy.

- Explicit links (``[text](url "title")``, ``[text][ref]``, ``[text]``) always
  carry a ``title`` attribute. Links whose URL starts with ``http`` open in a
  new tab with the referrer stripped; everything else navigates in place.
- Autolinks (``<http://...>``, ``<user@host>``, bare URLs, ``www.`` hosts and
  bare email addresses) always open in a new tab with the referrer stripped.
"""

from xml.etree import ElementTree as etree

from markdown import util
from markdown.extensions import Extension
from markdown.inlinepatterns import (
    AUTOLINK_RE,
    AUTOMAIL_RE,
    LINK_RE,
    REFERENCE_RE,
    InlineProcessor,
    LinkInlineProcessor,
    ReferenceInlineProcessor,
    ShortReferenceInlineProcessor,
)

EXTERNAL_PREFIX = "http"

# Trailing punctuation is not part of a bare link
BARE_URL_RE = r"(?<![\w/.@])((?:https?|ftp)://[^\s<>]*[^\s<>.,:;!?\"')\]])"
BARE_WWW_RE = r"(?<![\w/.@])(www\.[^\s<>]*[^\s<>.,:;!?\"')\]])"
BARE_EMAIL_RE = r"(?<![\w.+\-@/])([\w.+\-]+@[\w\-]+(?:\.[\w\-]+)+)"


def link_attributes(url: str, title: str | None) -> dict[str, str]:
    attributes = {"href": url, "title": title or ""}
    if url.startswith(EXTERNAL_PREFIX):
        attributes["target"] = "_blank"
        attributes["rel"] = "noreferrer"
    return attributes


def autolink_attributes(url: str, kind: str) -> dict[str, str]:
    """
    Attributes for an autolinked address.

    ``kind`` is either "url" or "email". Both are treated the same way: the
    address becomes the href as written (no ``mailto:`` is added) and opens in
    a new tab.
    """
    return {"href": url, "target": "_blank", "rel": "noreferrer"}


class ExplicitLinkInlineProcessor(LinkInlineProcessor):
    """``[text](url "title")``"""

    def handleMatch(self, m, data):
        el, start, end = super().handleMatch(m, data)
        if el is not None:
            el.attrib.update(link_attributes(el.get("href", ""), el.get("title")))
        return el, start, end


class ExplicitReferenceInlineProcessor(ReferenceInlineProcessor):
    """``[text][ref]``"""

    def makeTag(self, href, title, text):
        el = super().makeTag(href, title, text)
        el.attrib.update(link_attributes(href, title))
        return el


class ExplicitShortReferenceInlineProcessor(ShortReferenceInlineProcessor):
    """``[ref]``"""

    def makeTag(self, href, title, text):
        el = super().makeTag(href, title, text)
        el.attrib.update(link_attributes(href, title))
        return el


class AutolinkInlineProcessor(InlineProcessor):
    """Turn a matched address into an anchor whose text is the address itself."""

    ANCESTOR_EXCLUDES = ("a",)

    def __init__(self, pattern, md, kind="url", prefix=""):
        super().__init__(pattern, md)
        self.kind = kind
        self.prefix = prefix

    def handleMatch(self, m, data):
        url = self.prefix + self.unescape(m.group(1))

        el = etree.Element("a")
        el.attrib.update(autolink_attributes(url, self.kind))
        el.text = util.AtomicString(url)
        return el, m.start(0), m.end(0)


class WorkshopLinkExtension(Extension):
    def extendMarkdown(self, md):
        # Same names and priorities as the default processors so they are replaced
        md.inlinePatterns.register(
            ExplicitReferenceInlineProcessor(REFERENCE_RE, md), "reference", 170
        )
        md.inlinePatterns.register(ExplicitLinkInlineProcessor(LINK_RE, md), "link", 160)
        md.inlinePatterns.register(
            ExplicitShortReferenceInlineProcessor(REFERENCE_RE, md), "short_reference", 130
        )
        md.inlinePatterns.register(AutolinkInlineProcessor(AUTOLINK_RE, md), "autolink", 120)
        md.inlinePatterns.register(
            AutolinkInlineProcessor(AUTOMAIL_RE, md, kind="email"), "automail", 110
        )

        # Bare addresses must be claimed before emphasis sees underscores in them,
        # and after raw inline HTML has been stashed.
        md.inlinePatterns.register(AutolinkInlineProcessor(BARE_URL_RE, md), "bare_url", 85)
        md.inlinePatterns.register(
            AutolinkInlineProcessor(BARE_WWW_RE, md, prefix="http://"), "bare_www", 84
        )
        md.inlinePatterns.register(
            AutolinkInlineProcessor(BARE_EMAIL_RE, md, kind="email"), "bare_email", 83
        )


def makeExtension(**kwargs):
    return WorkshopLinkExtension(**kwargs)
