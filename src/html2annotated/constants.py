#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2annotated/constants.py
"""Constants and default values used throughout html2annotated.

This module centralizes tag names, scale factors, sanitizer allowlists and
option defaults so that the walker, the HTML front end and the options layer
share a single source of truth.

"""

from __future__ import annotations

from typing import Literal

# Type aliases
HtmlParser = Literal["html.parser", "html5lib", "lxml"]
BaselineDirection = Literal["superscript", "subscript"]

# Dependency requirements as (install_name, import_name, version_spec)
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.1"), ("bleach", "bleach", ">=6.0.0")]

# Baseline shift directions
BASELINE_SUPERSCRIPT: BaselineDirection = "superscript"
BASELINE_SUBSCRIPT: BaselineDirection = "subscript"

# Relative sizes
SMALL_SCALE_FACTOR = 0.75
BASELINE_SHIFT_SCALE_FACTOR = 0.66
LIST_INDENT_RATIO = 0.5
DD_FIRST_LINE_RATIO = 1.0
DD_REST_LINE_RATIO = 1.5

# Literal text emitted by block-level tags
PARAGRAPH_SEPARATOR = "\n\n"
LINE_BREAK = "\n"
QUOTE_MARK = '"'
DEFAULT_BULLET = "• "
DEFAULT_ORDERED_LIST_START = 0
DEFAULT_INVERT_BASELINE_SHIFT = True

# Base text style
DEFAULT_FONT_SIZE = 14.0
DEFAULT_LINK_COLOR = "#0000ff"


class Tag:
    """HTML tag and attribute names understood by the walker."""

    A = "a"
    B = "b"
    BLOCKQUOTE = "blockquote"
    BODY = "body"
    BR = "br"
    CITE = "cite"
    CODE = "code"
    DD = "dd"
    DL = "dl"
    DT = "dt"
    EM = "em"
    I = "i"  # noqa: E741
    LI = "li"
    OL = "ol"
    P = "p"
    PRE = "pre"
    Q = "q"
    SMALL = "small"
    SPAN = "span"
    STRIKE = "strike"
    STRONG = "strong"
    SUB = "sub"
    SUP = "sup"
    U = "u"
    UL = "ul"

    HREF = "href"


# Sanitizer allowlist: formatting/structural tags plus anchors and images
SAFE_HTML_TAGS = frozenset(
    {
        "a",
        "b",
        "blockquote",
        "br",
        "cite",
        "code",
        "dd",
        "dl",
        "dt",
        "em",
        "i",
        "img",
        "li",
        "ol",
        "p",
        "pre",
        "q",
        "small",
        "span",
        "strike",
        "strong",
        "sub",
        "sup",
        "u",
        "ul",
    }
)

SAFE_HTML_ATTRIBUTES: dict[str, tuple[str, ...]] = {
    "a": ("href",),
    "blockquote": ("cite",),
    "q": ("cite",),
    "img": ("align", "alt", "height", "src", "title", "width"),
}

# Attributes holding URLs, with the protocols allowed for each
URL_ATTRIBUTE_PROTOCOLS: dict[tuple[str, str], frozenset[str]] = {
    ("a", "href"): frozenset({"ftp", "http", "https", "mailto"}),
    ("blockquote", "cite"): frozenset({"http", "https"}),
    ("q", "cite"): frozenset({"http", "https"}),
    ("img", "src"): frozenset({"http", "https"}),
}

SAFE_PROTOCOLS = frozenset({"ftp", "http", "https", "mailto"})

# Elements removed together with their content before allowlist cleaning
DANGEROUS_HTML_ELEMENTS = {"script", "style", "object", "embed", "form", "input", "iframe", "template", "noscript"}

# Document-level elements whose text is never part of the converted content
NON_CONTENT_ELEMENTS = {"head", "title", "meta", "link"}

# URL scheme security
DANGEROUS_SCHEMES = {
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
}

# HTML front end defaults
DEFAULT_HTML_PARSER: HtmlParser = "html.parser"
DEFAULT_HTML_COLLAPSE_WHITESPACE = True
DEFAULT_PRESERVE_RELATIVE_LINKS = False
DEFAULT_SANITIZE = True

# Serialization
SERIALIZATION_SCHEMA_VERSION = 1
