"""Slug derivation: turns an article title into a URL-safe identifier."""

import re

# ASCII letters, digits and underscore survive; everything else is dropped.
_DISALLOWED = re.compile(r"[^a-z0-9_\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")

# Path segments the blog routes already claim (``/blogs/slug/{slug}``).
RESERVED_SLUGS = frozenset({"slug"})


def generate_slug(title: str) -> str:
    """Build a lower-case, hyphen-delimited ASCII slug from a title.

    The transform is deterministic and never raises. It may return an empty
    string when the title holds nothing but punctuation, so callers must treat
    an empty result as invalid input.

    Example:
        >>> generate_slug("Hello, World!!")
        'hello-world'
    """
    slug = title.lower().strip()
    slug = _DISALLOWED.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def with_suffix(slug: str, counter: int) -> str:
    """Disambiguate a taken slug: ``with_suffix("menu", 2) == "menu-2"``."""
    return f"{slug}-{counter}"
