#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markup parsers producing annotated text."""

from html2annotated.parsers.base import BaseParser
from html2annotated.parsers.html import HtmlToAnnotatedConverter

__all__ = ["BaseParser", "HtmlToAnnotatedConverter"]
