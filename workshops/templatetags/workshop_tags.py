# workshops/templatetags/workshop_tags.py
#
# Rendered workshop HTML is marked safe. Heading labels and emoji images are
# inserted without escaping, so only render workshop sources you trust.

from django import template
from django.utils.safestring import mark_safe

from workshops.markdown.renderer import render_document, render_markdown, render_sidebar

register = template.Library()


@register.filter(name="workshop_markdown")
def workshop_markdown_filter(value):
    return mark_safe(render_markdown(value or ""))


@register.filter(name="workshop_sidebar")
def workshop_sidebar_filter(value):
    return mark_safe(render_sidebar(value or ""))


@register.simple_tag
def workshop_document(value):
    """
    Render body and sidebar from a single parse.

        {% workshop_document workshop.source as doc %}
        {{ doc.sidebar_html }}
        {{ doc.body_html }}
    """
    document = render_document(value or "")
    return {
        "body_html": mark_safe(document.body_html),
        "sidebar_html": mark_safe(document.sidebar_html()),
        "headings": document.headings,
    }
