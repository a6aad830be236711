from .dedup import unique_by
from .sanitizer import DEFAULT_POLICY, SanitizerPolicy, excerpt, sanitize_html, to_plain_text
from .slugs import RESERVED_SLUGS, generate_slug, with_suffix

__all__ = [
    "unique_by",
    "DEFAULT_POLICY",
    "SanitizerPolicy",
    "excerpt",
    "sanitize_html",
    "to_plain_text",
    "RESERVED_SLUGS",
    "generate_slug",
    "with_suffix",
]
