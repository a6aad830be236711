"""HTML sanitization for article bodies.

Authoring tools hand us arbitrary rich text. Before anything is stored it is
reduced to a small allow-list of structural and inline tags; everything else
is removed (not escaped) while the enclosed text survives. The same engine,
run with an empty allow-list, produces the plain text used for SEO excerpts.

Usage:
    from blog_api.domain.content.sanitizer import sanitize_html, excerpt
    safe = sanitize_html(raw)
    description = excerpt(safe, 160)
"""

import re
from dataclasses import dataclass, field

from bs4 import BeautifulSoup
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction

_NON_CONTENT_NODES = (Comment, CData, Declaration, Doctype, ProcessingInstruction)

# Browsers ignore control characters and spaces inside a URL scheme,
# so "java\tscript:" must be read as "javascript:".
_URL_NOISE = re.compile(r"[\x00-\x20]+")
_URL_SCHEME = re.compile(r"^([a-z][a-z0-9.+\-]*):", re.IGNORECASE)
# An entity cut in half by truncation.
_PARTIAL_ENTITY = re.compile(r"&[#a-zA-Z0-9]*$")


@dataclass(frozen=True)
class SanitizerPolicy:
    """Allow-list of tags, attributes and URL schemes that survive cleaning."""

    version: str
    allowed_tags: frozenset[str]
    allowed_attributes: dict[str, frozenset[str]] = field(default_factory=dict)
    allowed_schemes: frozenset[str] = frozenset()
    url_attributes: frozenset[str] = frozenset({"href", "src"})
    # Tags removed together with everything inside them.
    discard_with_content: frozenset[str] = frozenset(
        {"script", "style", "textarea", "noscript", "option"}
    )


DEFAULT_POLICY = SanitizerPolicy(
    version="2024-1",
    allowed_tags=frozenset({
        "h1", "h2", "h3", "h4", "h5", "h6",
        "p", "br",
        "strong", "b", "em", "i", "u",
        "ul", "ol", "li",
        "a",
    }),
    allowed_attributes={"a": frozenset({"href", "target", "rel"})},
    allowed_schemes=frozenset({"http", "https"}),
)

PLAIN_TEXT_POLICY = SanitizerPolicy(version=DEFAULT_POLICY.version, allowed_tags=frozenset())


def sanitize_html(raw_html: str, policy: SanitizerPolicy = DEFAULT_POLICY) -> str:
    """Return ``raw_html`` reduced to the tags and attributes the policy allows."""
    return str(_clean(raw_html, policy))


def to_plain_text(html: str) -> str:
    """Strip every tag, keeping only the text content.

    The text stays entity-escaped (``&amp;``, ``&lt;``, ``&gt;``), so markup
    that was escaped in the body never turns back into a tag.
    """
    return _clean(html, PLAIN_TEXT_POLICY).decode(formatter="minimal")


def excerpt(html: str, length: int) -> str:
    """Plain-text prefix of ``html``, at most ``length`` characters long."""
    text = to_plain_text(html)
    if len(text) <= length:
        return text
    return _PARTIAL_ENTITY.sub("", text[:length])


def _clean(raw_html: str, policy: SanitizerPolicy) -> BeautifulSoup:
    soup = BeautifulSoup(raw_html or "", "html.parser")

    for node in soup.find_all(string=lambda s: isinstance(s, _NON_CONTENT_NODES)):
        node.extract()

    for tag in soup.find_all(sorted(policy.discard_with_content)):
        if not tag.decomposed:
            tag.decompose()

    for tag in soup.find_all(True):
        if tag.name not in policy.allowed_tags:
            tag.unwrap()
            continue
        allowed = policy.allowed_attributes.get(tag.name, frozenset())
        for name in list(tag.attrs):
            if name not in allowed:
                del tag[name]
            elif name in policy.url_attributes and not _scheme_allowed(tag[name], policy):
                del tag[name]

    return soup


def _scheme_allowed(value: str | list[str], policy: SanitizerPolicy) -> bool:
    """Relative URLs carry no scheme and are kept."""
    url = " ".join(value) if isinstance(value, list) else value
    match = _URL_SCHEME.match(_URL_NOISE.sub("", url))
    if match is None:
        return True
    return match.group(1).lower() in policy.allowed_schemes
