"""
Plain-text helpers shared by the form and the model.
"""
import html
import math

from django.utils.html import strip_tags
from django.utils.text import Truncator

from .conf import blog_settings


def html_to_text(value):
    """Strip tags and entities from editor HTML and collapse whitespace."""
    text = html.unescape(strip_tags(value or ""))
    return " ".join(text.split())


def excerpt_from_html(value, length=None):
    """Return the first ``length`` characters of the text inside ``value``."""
    length = length or blog_settings.EXCERPT_LENGTH
    return Truncator(html_to_text(value)).chars(length)


def split_tags(value):
    """Split a comma-separated tag string into a clean list."""
    return [tag.strip() for tag in (value or "").split(",") if tag.strip()]


def reading_time(value):
    """Minutes needed to read the text inside ``value``, at least one."""
    words = len(html_to_text(value).split())
    return max(1, math.ceil(words / blog_settings.READING_WORDS_PER_MINUTE))
