# workshops/markdown/emoji.py
"""
Emoji shortcodes rendered as inline images.

Shortcodes (``:smile:``, ``:+1:``, ``:octocat:``) are looked up in the GitHub
emoji index that ships with PyMdown Extensions. Images follow the gemoji file
layout:

    :smile:    -> /images/emoji/unicode/1f604.png
    :octocat:  -> /images/emoji/octocat.png

Unknown shortcodes are left in the text as typed.
"""

from xml.etree import ElementTree as etree

from pymdownx import gemoji_db

DEFAULT_IMAGE_PATH = "/images/emoji/"


def _image_filename(shortname: str, uc: str | None) -> str:
    if uc:
        return f"unicode/{uc}.png"
    # GitHub custom emoji have no code points, only an image named after them
    return f"{shortname.strip(':')}.png"


def resolve_emoji(name: str) -> str | None:
    """
    Return the image filename for an emoji name or alias, or None.

    ``name`` is given without colons: ``resolve_emoji("thumbsup")``.
    """
    shortname = f":{name}:"
    shortname = gemoji_db.aliases.get(shortname, shortname)
    entry = gemoji_db.emoji.get(shortname)
    if entry is None:
        return None
    return _image_filename(shortname, entry.get("unicode"))


def emoji_image(index, shortname, alias, uc, alt, title, category, options, md):
    """
    Emoji generator for ``pymdownx.emoji``.

    Returns a trusted ``<img>`` element. Its ``alt`` is always the canonical
    shortcode, even when the source used an alias. Only attribute values built
    from the emoji index end up in the element, never source text.
    """
    image_path = options.get("image_path", DEFAULT_IMAGE_PATH)

    el = etree.Element("img")
    el.set("src", f"{image_path}{_image_filename(shortname, uc)}")
    el.set("alt", shortname)
    el.set("class", "emoji")
    return el
