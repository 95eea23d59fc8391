#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2annotated/utils/html_sanitizer.py
"""HTML sanitization utilities for security.

Markup is sanitized before it is parsed into the node tree the walker
consumes. Sanitization runs in two passes:

1. A BeautifulSoup pre-pass removes dangerous and non-content elements
   (``script``, ``style``, ``head`` ...) together with their content, and
   resolves relative URLs against an optional base URL.
2. ``bleach.clean`` strips every tag and attribute outside the safe allowlist
   (keeping the text of stripped tags) and rejects URLs whose protocol is not
   allowed for that attribute.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Iterable, Mapping
from urllib.parse import urljoin

from html2annotated.constants import (
    DANGEROUS_HTML_ELEMENTS,
    DANGEROUS_SCHEMES,
    DEFAULT_HTML_PARSER,
    NON_CONTENT_ELEMENTS,
    SAFE_HTML_ATTRIBUTES,
    SAFE_HTML_TAGS,
    SAFE_PROTOCOLS,
    URL_ATTRIBUTE_PROTOCOLS,
    HtmlParser,
)

logger = logging.getLogger(__name__)

_SCHEME_PATTERN = re.compile(r"^([a-z][a-z0-9+.\-]*):")
_IGNORED_URL_CHARS = re.compile(r"[\x00-\x20\x7f]")


def _normalize_url(url: str) -> str:
    # Browsers ignore control characters and whitespace inside a scheme
    return _IGNORED_URL_CHARS.sub("", url).lower()


def get_url_scheme(url: str) -> str | None:
    """Return the lower-cased scheme of ``url``, or None for relative URLs.

    Examples
    --------
    >>> get_url_scheme("HTTPS://example.com")
    'https'
    >>> get_url_scheme("/relative/path") is None
    True

    """
    match = _SCHEME_PATTERN.match(_normalize_url(url))
    return match.group(1) if match else None


def is_relative_url(url: str) -> bool:
    """Check whether ``url`` has no scheme (includes protocol-relative ``//host`` URLs)."""
    return get_url_scheme(url) is None


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a dangerous scheme.

    Dangerous schemes include javascript:, vbscript:, data:text/html, and others
    that can be used for XSS attacks or malicious code execution.

    Examples
    --------
    >>> is_url_scheme_dangerous("https://example.com")
    False
    >>> is_url_scheme_dangerous("java\\tscript:alert('xss')")
    True

    """
    if not url or not url.strip():
        return False
    normalized = _normalize_url(url)
    return any(normalized.startswith(scheme) for scheme in DANGEROUS_SCHEMES)


def is_url_safe(url: str) -> bool:
    """Check if a URL is safe (no dangerous schemes).

    Examples
    --------
    >>> is_url_safe("https://example.com")
    True
    >>> is_url_safe("javascript:alert('xss')")
    False

    """
    return not is_url_scheme_dangerous(url)


def is_url_allowed(
    url: str,
    protocols: Iterable[str],
    *,
    preserve_relative_links: bool = False,
) -> bool:
    """Check a URL attribute value against an allowed protocol set.

    Parameters
    ----------
    url : str
        The attribute value
    protocols : iterable of str
        Allowed schemes for this attribute
    preserve_relative_links : bool, default False
        Whether URLs without a scheme are accepted

    Returns
    -------
    bool
        True if the URL may be kept

    """
    if not is_url_safe(url):
        return False
    scheme = get_url_scheme(url)
    if scheme is None:
        return preserve_relative_links
    return scheme in protocols


def make_attribute_filter(
    allowed_attributes: Mapping[str, Iterable[str]] = SAFE_HTML_ATTRIBUTES,
    *,
    preserve_relative_links: bool = False,
) -> Callable[[str, str, str], bool]:
    """Build a bleach attribute filter enforcing the allowlist and URL protocols.

    Parameters
    ----------
    allowed_attributes : mapping of str to iterable of str
        Tag name to allowed attribute names
    preserve_relative_links : bool, default False
        Whether URL attributes without a scheme are kept

    Returns
    -------
    callable
        ``filter(tag, name, value) -> bool`` as accepted by ``bleach.clean``

    """
    allowed = {tag: frozenset(names) for tag, names in allowed_attributes.items()}

    def filter_attributes(tag: str, name: str, value: str) -> bool:
        if name not in allowed.get(tag, ()):
            return False
        protocols = URL_ATTRIBUTE_PROTOCOLS.get((tag, name))
        if protocols is None:
            return True
        keep = is_url_allowed(value, protocols, preserve_relative_links=preserve_relative_links)
        if not keep:
            logger.debug("Dropping %s[%s]=%r: protocol not allowed", tag, name, value)
        return keep

    return filter_attributes


def strip_dangerous_elements(soup: Any) -> int:
    """Remove dangerous and non-content elements, including their content.

    Parameters
    ----------
    soup : BeautifulSoup
        Parsed document, modified in place

    Returns
    -------
    int
        Number of elements removed

    """
    removed = 0
    for tag in soup.find_all(sorted(DANGEROUS_HTML_ELEMENTS | NON_CONTENT_ELEMENTS)):
        # Parent may already have been decomposed
        if tag.decomposed:
            continue
        tag.decompose()
        removed += 1
    return removed


def resolve_relative_urls(soup: Any, base_url: str) -> None:
    """Resolve relative URL attribute values against ``base_url`` in place."""
    for tag_name, attr_name in URL_ATTRIBUTE_PROTOCOLS:
        for tag in soup.find_all(tag_name):
            value = tag.get(attr_name)
            if isinstance(value, str) and value.strip() and is_relative_url(value):
                tag[attr_name] = urljoin(base_url, value.strip())


def _body_markup(soup: Any) -> str:
    body = soup.find("body")
    if body is not None:
        return body.decode_contents()
    return soup.decode_contents()


def sanitize_html_string(
    content: str,
    *,
    allowed_tags: Iterable[str] = SAFE_HTML_TAGS,
    allowed_attributes: Mapping[str, Iterable[str]] = SAFE_HTML_ATTRIBUTES,
    preserve_relative_links: bool = False,
    base_url: str | None = None,
    html_parser: HtmlParser = DEFAULT_HTML_PARSER,
) -> str:
    """Sanitize an HTML string down to the safe tag/attribute/protocol allowlist.

    Parameters
    ----------
    content : str
        HTML content to sanitize
    allowed_tags : iterable of str
        Tags kept in the output; other tags are stripped and their text kept
    allowed_attributes : mapping of str to iterable of str
        Tag name to allowed attribute names
    preserve_relative_links : bool, default False
        Keep URL attributes without a scheme
    base_url : str or None, default None
        Resolve relative URLs against this base before protocol checks
    html_parser : str, default "html.parser"
        BeautifulSoup parser used for the pre-pass

    Returns
    -------
    str
        Sanitized HTML fragment (body content only)

    Examples
    --------
    >>> sanitize_html_string('<p onclick="x()">Hi<script>alert(1)</script></p>')
    '<p>Hi</p>'

    """
    import bleach
    from bs4 import BeautifulSoup

    soup = BeautifulSoup(content, html_parser)
    removed = strip_dangerous_elements(soup)
    if removed:
        logger.debug("Removed %d dangerous or non-content element(s) before cleaning", removed)
    if base_url:
        resolve_relative_urls(soup, base_url)

    return bleach.clean(
        _body_markup(soup),
        tags=frozenset(allowed_tags),
        attributes=make_attribute_filter(allowed_attributes, preserve_relative_links=preserve_relative_links),
        protocols=SAFE_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )


__all__ = [
    "get_url_scheme",
    "is_relative_url",
    "is_url_scheme_dangerous",
    "is_url_safe",
    "is_url_allowed",
    "make_attribute_filter",
    "strip_dangerous_elements",
    "resolve_relative_urls",
    "sanitize_html_string",
]
