from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from pymdownx.emoji import gemoji

from .emoji import DEFAULT_IMAGE_PATH, emoji_image


def _string_setting(name, default):
    value = getattr(settings, name, default)
    if not isinstance(value, str):
        raise ImproperlyConfigured(f"{name} must be a string, got {type(value).__name__}.")
    return value


def get_markdown_config():
    """
    Configuration for Python-Markdown rendering of workshop content.

    Built-in extensions cover tables and smart typography, PyMdown Extensions
    cover strikethrough and emoji, and our own extensions apply the link,
    fenced code and heading outline policies.

    Settings:
        WORKSHOP_EMOJI_IMAGE_PATH: URL prefix for emoji images
        WORKSHOP_HIGHLIGHT_CSS_CLASS: wrapper class of highlighted code blocks
    """
    emoji_image_path = _string_setting("WORKSHOP_EMOJI_IMAGE_PATH", DEFAULT_IMAGE_PATH)
    highlight_css_class = _string_setting("WORKSHOP_HIGHLIGHT_CSS_CLASS", "highlight")

    return {
        "extensions": [
            "tables",
            "smarty",
            "pymdownx.tilde",
            "pymdownx.emoji",
            "workshops.markdown.extensions.links",
            "workshops.markdown.extensions.fenced_code",
        ],
        "extension_configs": {
            # ~~text~~ only; single tildes stay literal
            "pymdownx.tilde": {"subscript": False},
            "pymdownx.emoji": {
                "emoji_index": gemoji,
                "emoji_generator": emoji_image,
                "options": {"image_path": emoji_image_path},
            },
            "workshops.markdown.extensions.fenced_code": {
                "css_class": highlight_css_class,
            },
        },
        "output_format": "html",
    }
