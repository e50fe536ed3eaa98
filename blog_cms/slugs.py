"""
Slug generation for post titles.
"""
import re

# Letters outside ASCII are dropped; any unicode whitespace still separates words.
_DISALLOWED = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def slugify(text):
    """
    Turn free text into a URL-safe slug.

    >>> slugify("Hello, World!  Foo")
    'hello-world-foo'
    """
    slug = _DISALLOWED.sub("", text.lower())
    slug = _WHITESPACE.sub("-", slug.strip())
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")
