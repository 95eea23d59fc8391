#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2annotated/parsers/html.py
"""HTML to annotated text converter.

This module is the front end around the style tree walker: it sanitizes raw
markup, parses it with BeautifulSoup, adapts the soup into the read-only node
tree the walker consumes, walks it and trims the result.

"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterator, Optional, Union

from html2annotated.annotated.styles import TextStyle
from html2annotated.annotated.text import AnnotatedText, trim
from html2annotated.constants import DEPS_HTML, Tag
from html2annotated.dom import ElementNode, Node, TextNode
from html2annotated.exceptions import DependencyError, ParsingError
from html2annotated.options.html import HtmlOptions
from html2annotated.parsers.base import BaseParser
from html2annotated.utils.decorators import debug_timer, requires_dependencies
from html2annotated.utils.html_sanitizer import sanitize_html_string
from html2annotated.walker import StyleTreeWalker

logger = logging.getLogger(__name__)

# HTML whitespace only; non-breaking spaces are content
_HTML_WHITESPACE = re.compile(r"[ \t\n\r\f]+")


class HtmlToAnnotatedConverter(BaseParser):
    """Convert HTML markup to annotated text.

    Parameters
    ----------
    options : HtmlOptions or None, default = None
        Conversion options
    text_style : TextStyle or None, default = None
        Base text style for relative sizes and link colour

    Examples
    --------
    >>> converter = HtmlToAnnotatedConverter()
    >>> converter.parse("<p>Hello <b>world</b></p>").text
    'Hello world'

    """

    def __init__(self, options: HtmlOptions | None = None, text_style: Optional[TextStyle] = None):
        """Initialize the HTML converter with options and a base text style."""
        BaseParser._validate_options_type(options, HtmlOptions, "html")
        options = options or HtmlOptions()
        super().__init__(options)
        self.options: HtmlOptions = options
        self.text_style = text_style or TextStyle()

    def parse(self, input_data: Union[str, bytes]) -> AnnotatedText:
        """Convert HTML markup to trimmed annotated text.

        Parameters
        ----------
        input_data : str or bytes
            HTML markup, as text or UTF-8 bytes

        Returns
        -------
        AnnotatedText
            The annotated text with leading and trailing whitespace removed

        Raises
        ------
        ParsingError
            If sanitization or parsing fails
        DependencyError
            If BeautifulSoup, bleach or the selected parser backend is missing

        """
        html_content = self._load_text_content(input_data)
        return self.convert_to_annotated(html_content)

    def convert_to_annotated(self, html_content: str) -> AnnotatedText:
        """Sanitize, parse, walk and trim an HTML string."""
        root = self.parse_to_tree(html_content)

        walker = StyleTreeWalker(self.text_style, self.options)
        with debug_timer(logger, "Style tree walk"):
            builder = walker.walk(root)

        return trim(builder)

    @requires_dependencies("html", DEPS_HTML)
    def parse_to_tree(self, html_content: str) -> ElementNode:
        """Sanitize and parse an HTML string into a ``body`` node tree.

        Raises
        ------
        ParsingError
            If sanitization or parsing fails
        DependencyError
            If the selected parser backend is not installed

        """
        from bs4 import BeautifulSoup
        from bs4.exceptions import FeatureNotFound

        stage = "sanitize"
        try:
            if self.options.sanitize:
                html_content = sanitize_html_string(
                    html_content,
                    preserve_relative_links=self.options.preserve_relative_links,
                    base_url=self.options.base_url,
                    html_parser=self.options.html_parser,
                )
                logger.debug("Sanitized HTML to %d characters", len(html_content))
            stage = "parse"
            soup = BeautifulSoup(html_content, self.options.html_parser)
        except FeatureNotFound as e:
            raise DependencyError(
                "html",
                missing_packages=[(self.options.html_parser, "")],
                message=f"Selected HtmlOptions.html_parser not found: {e}.",
            ) from e
        except Exception as e:
            raise ParsingError(
                f"Failed to parse HTML: {e}",
                parsing_stage=stage,
                original_error=e,
            ) from e

        body = soup.find("body")
        container = body if body is not None else soup
        return ElementNode(Tag.BODY, {}, self._convert_children(container))

    def _convert_children(self, container: Any) -> tuple[Node, ...]:
        """Adapt the children of a BeautifulSoup node into the walker's node tree.

        The soup is traversed with an explicit stack of open elements, so
        arbitrarily deep markup is adapted without recursion. Comments,
        doctypes and other preformatted strings are dropped.

        """
        from bs4.element import NavigableString, PreformattedString
        from bs4.element import Tag as SoupTag

        root_children: list[Node] = []
        # (soup tag, inside <pre>, converted children, pending soup children)
        stack: list[tuple[Any, bool, list[Node], Iterator[Any]]] = [
            (container, False, root_children, iter(container.children))
        ]
        while stack:
            soup_node, in_pre, children, pending = stack[-1]
            child = next(pending, None)
            if child is None:
                stack.pop()
                if stack:
                    element = ElementNode(soup_node.name, _flatten_attributes(soup_node.attrs), tuple(children))
                    stack[-1][2].append(element)
                continue

            if isinstance(child, SoupTag):
                stack.append((child, in_pre or child.name == Tag.PRE, [], iter(child.children)))
            elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                text = str(child)
                if self.options.collapse_whitespace and not in_pre:
                    text = _HTML_WHITESPACE.sub(" ", text)
                children.append(TextNode(text))

        return tuple(root_children)


def _flatten_attributes(attrs: dict[str, Any]) -> dict[str, str]:
    """Join multi-valued attributes such as ``class`` with spaces."""
    return {name: " ".join(value) if isinstance(value, list) else str(value) for name, value in attrs.items()}


__all__ = ["HtmlToAnnotatedConverter"]
