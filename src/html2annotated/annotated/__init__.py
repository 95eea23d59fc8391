#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2annotated/annotated/__init__.py
"""Annotated text primitives.

This package holds the value types produced by a conversion:

- ``styles``: the style attribute variants and the base ``TextStyle``
- ``builder``: the mutable, append-only ``AnnotatedStringBuilder``
- ``text``: the immutable ``AnnotatedText``, its ranges, runs and ``trim``
- ``serialization``: dictionary and JSON forms for rendering collaborators

"""

from html2annotated.annotated.builder import AnnotatedStringBuilder
from html2annotated.annotated.serialization import (
    annotated_from_dict,
    annotated_from_json,
    annotated_to_dict,
    annotated_to_json,
)
from html2annotated.annotated.styles import (
    BaselineShift,
    Bold,
    FontSizeScale,
    ForegroundColor,
    Italic,
    LineThrough,
    Monospace,
    ParagraphIndent,
    StyleAttribute,
    TextStyle,
    Underline,
    is_paragraph_style,
)
from html2annotated.annotated.text import AnnotatedText, Range, Run, trim

__all__ = [
    "AnnotatedStringBuilder",
    "AnnotatedText",
    "Range",
    "Run",
    "trim",
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
    "is_paragraph_style",
    "annotated_to_dict",
    "annotated_from_dict",
    "annotated_to_json",
    "annotated_from_json",
]
