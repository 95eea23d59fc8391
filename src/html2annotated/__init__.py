"""html2annotated - Convert HTML markup into styled, annotated text.

html2annotated turns a small, sanitized subset of HTML into plain text plus
two lists of half-open ranges: style attributes (bold, italic, monospace,
relative font size, baseline shift, colour, paragraph indent) and link
targets. The result is what a text-rendering surface needs to draw rich text
without a full HTML engine.

The conversion runs in three stages: markup is sanitized with bleach and
parsed with BeautifulSoup, a style tree walker appends text and opens styled
scopes on an annotated string builder, and the finished text is trimmed of
leading and trailing whitespace with its ranges re-based.

Requirements
------------
- Python 3.10+
- beautifulsoup4 and bleach

Examples
--------
Basic usage:

    >>> from html2annotated import html_to_annotated
    >>> result = html_to_annotated('<p>Read <a href="https://example.com">this</a></p>')
    >>> result.text
    'Read this'
    >>> [link.item for link in result.links]
    ['https://example.com']

Converting the same markup repeatedly:

    >>> from html2annotated import HtmlToAnnotatedString, TextStyle
    >>> value = HtmlToAnnotatedString("<small>fine print</small>")
    >>> value.to_annotated_string(TextStyle(font_size=18.0)).text
    'fine print'

See Also
--------
html2annotated.annotated : annotated text value types and serialization
html2annotated.walker : the style tree walker

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "html2annotated requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from html2annotated.annotated import (  # noqa: E402
    AnnotatedStringBuilder,
    AnnotatedText,
    BaselineShift,
    Bold,
    FontSizeScale,
    ForegroundColor,
    Italic,
    LineThrough,
    Monospace,
    ParagraphIndent,
    Range,
    Run,
    StyleAttribute,
    TextStyle,
    Underline,
    annotated_from_dict,
    annotated_from_json,
    annotated_to_dict,
    annotated_to_json,
    trim,
)
from html2annotated.api import HtmlToAnnotatedString, html_to_annotated  # noqa: E402
from html2annotated.dom import ElementNode, Node, TextNode, element  # noqa: E402
from html2annotated.exceptions import (  # noqa: E402
    AnnotationScopeError,
    DependencyError,
    Html2AnnotatedError,
    InvalidOptionsError,
    ParsingError,
    ValidationError,
)
from html2annotated.options import BaseParserOptions, HtmlOptions  # noqa: E402
from html2annotated.parsers import HtmlToAnnotatedConverter  # noqa: E402
from html2annotated.walker import StyleTreeWalker, convert  # noqa: E402

__all__ = [
    "__version__",
    "html_to_annotated",
    "HtmlToAnnotatedString",
    "HtmlToAnnotatedConverter",
    "StyleTreeWalker",
    "convert",
    "trim",
    # Node tree
    "Node",
    "TextNode",
    "ElementNode",
    "element",
    # Annotated text
    "AnnotatedStringBuilder",
    "AnnotatedText",
    "Range",
    "Run",
    "TextStyle",
    "StyleAttribute",
    "Bold",
    "Italic",
    "Underline",
    "LineThrough",
    "Monospace",
    "FontSizeScale",
    "BaselineShift",
    "ForegroundColor",
    "ParagraphIndent",
    "annotated_to_dict",
    "annotated_from_dict",
    "annotated_to_json",
    "annotated_from_json",
    # Options
    "BaseParserOptions",
    "HtmlOptions",
    # Exceptions
    "Html2AnnotatedError",
    "ValidationError",
    "InvalidOptionsError",
    "AnnotationScopeError",
    "ParsingError",
    "DependencyError",
]
