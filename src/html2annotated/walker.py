#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2annotated/walker.py
"""Style tree walker: sanitized node tree to annotated text.

The walker visits the node tree depth-first in document order. Text nodes are
appended verbatim. Elements are dispatched on their tag name to a handler
that expands the element into work items: open a style, paragraph or link
scope, visit the children, close the scope again. Work items are processed
from an explicit stack, so nesting depth is bounded only by memory. Tags
without a handler fall back to their flattened text, so the walk is total
over any tree.

"""


from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from html2annotated.annotated.builder import AnnotatedStringBuilder
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
)
from html2annotated.constants import (
    BASELINE_SUBSCRIPT,
    BASELINE_SUPERSCRIPT,
    DD_FIRST_LINE_RATIO,
    DD_REST_LINE_RATIO,
    LINE_BREAK,
    LIST_INDENT_RATIO,
    PARAGRAPH_SEPARATOR,
    QUOTE_MARK,
    Tag,
)
from html2annotated.dom import ElementNode, Node, TextNode
from html2annotated.options.html import HtmlOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _OpenLink:
    """Work item that opens a link scope."""

    url: str


class _CloseScope:
    """Work item that closes the innermost open scope."""

    def __repr__(self) -> str:
        return "CLOSE_SCOPE"


_CLOSE_SCOPE = _CloseScope()

# Node to visit, literal text to append, style scope to open, link scope to open, or scope close
_WorkItem = Union[TextNode, ElementNode, str, StyleAttribute, _OpenLink, _CloseScope]


class StyleTreeWalker:
    """Convert a sanitized node tree into an annotated string builder.

    Parameters
    ----------
    text_style : TextStyle or None, default = None
        Base text style; its font size drives indent widths. Never mutated.
    options : HtmlOptions or None, default = None
        Conversion options (list numbering, bullet, scale factors)

    Examples
    --------
    >>> from html2annotated.dom import element
    >>> walker = StyleTreeWalker()
    >>> walker.walk(element("b", "hi")).to_annotated_text().text
    'hi'

    """

    # Dispatch table mapping tag names to handler methods
    _ELEMENT_HANDLERS = {
        Tag.A: "_expand_link",
        Tag.B: "_expand_bold",
        Tag.STRONG: "_expand_bold",
        Tag.BLOCKQUOTE: "_expand_blockquote",
        Tag.BODY: "_expand_element_or_children",
        Tag.SPAN: "_expand_element_or_children",
        Tag.BR: "_expand_line_break",
        Tag.CITE: "_expand_italic",
        Tag.EM: "_expand_italic",
        Tag.I: "_expand_italic",
        Tag.CODE: "_expand_monospace",
        Tag.PRE: "_expand_monospace",
        Tag.DL: "_expand_description_list",
        Tag.U: "_expand_underline",
        Tag.P: "_expand_paragraph",
        Tag.Q: "_expand_short_quotation",
        Tag.SMALL: "_expand_small",
        Tag.STRIKE: "_expand_strikethrough",
        Tag.SUB: "_expand_sub",
        Tag.SUP: "_expand_sup",
        Tag.OL: "_expand_ordered_list",
        Tag.UL: "_expand_unordered_list",
    }

    def __init__(self, text_style: TextStyle | None = None, options: HtmlOptions | None = None):
        """Initialize the walker with a base text style and options."""
        self.text_style = text_style or TextStyle()
        self.options = options or HtmlOptions()

    @property
    def _list_indent(self) -> float:
        return self.text_style.font_size * LIST_INDENT_RATIO

    def walk(self, root: Node, builder: AnnotatedStringBuilder | None = None) -> AnnotatedStringBuilder:
        """Append the annotated rendition of ``root`` to a builder.

        Parameters
        ----------
        root : Node
            Root of the sanitized node tree, usually a ``body`` element
        builder : AnnotatedStringBuilder or None, default = None
            Builder to append to. A new one is created if None.

        Returns
        -------
        AnnotatedStringBuilder
            The builder, with every scope opened during the walk closed

        """
        builder = builder if builder is not None else AnnotatedStringBuilder()
        stack: list[_WorkItem] = [root]
        while stack:
            item = stack.pop()
            if isinstance(item, TextNode):
                builder.append(item.text)
            elif isinstance(item, ElementNode):
                stack.extend(reversed(self._expand_element(item)))
            elif isinstance(item, str):
                builder.append(item)
            elif isinstance(item, _OpenLink):
                builder.push_link(item.url)
            elif isinstance(item, _CloseScope):
                builder.pop()
            else:
                builder.push_style(item)
        return builder

    def _expand_element(self, element: ElementNode) -> list[_WorkItem]:
        handler_name = self._ELEMENT_HANDLERS.get(element.tag)
        if handler_name:
            return getattr(self, handler_name)(element)
        logger.debug(f"No handler for <{element.tag}>, appending its flattened text")
        return [element.text()]

    def _expand_element_or_children(self, element: ElementNode) -> list[_WorkItem]:
        """Visit the children of ``element``, or append its text if it has none."""
        if element.children:
            return list(element.children)
        return [element.text()]

    def _expand_styled(self, element: ElementNode, style: StyleAttribute) -> list[_WorkItem]:
        return [style, *self._expand_element_or_children(element), _CLOSE_SCOPE]

    def _expand_bold(self, element: ElementNode) -> list[_WorkItem]:
        return self._expand_styled(element, Bold())

    def _expand_italic(self, element: ElementNode) -> list[_WorkItem]:
        return self._expand_styled(element, Italic())

    def _expand_underline(self, element: ElementNode) -> list[_WorkItem]:
        return self._expand_styled(element, Underline())

    def _expand_strikethrough(self, element: ElementNode) -> list[_WorkItem]:
        return self._expand_styled(element, LineThrough())

    def _expand_monospace(self, element: ElementNode) -> list[_WorkItem]:
        return self._expand_styled(element, Monospace())

    def _expand_small(self, element: ElementNode) -> list[_WorkItem]:
        return self._expand_styled(element, FontSizeScale(self.options.small_scale_factor))

    def _expand_sub(self, element: ElementNode) -> list[_WorkItem]:
        direction = BASELINE_SUPERSCRIPT if self.options.invert_baseline_shift else BASELINE_SUBSCRIPT
        return self._expand_styled(element, BaselineShift(direction, self.options.baseline_shift_scale_factor))

    def _expand_sup(self, element: ElementNode) -> list[_WorkItem]:
        direction = BASELINE_SUBSCRIPT if self.options.invert_baseline_shift else BASELINE_SUPERSCRIPT
        return self._expand_styled(element, BaselineShift(direction, self.options.baseline_shift_scale_factor))

    def _expand_link(self, element: ElementNode) -> list[_WorkItem]:
        """Expand a hyperlink: coloured, underlined, and annotated with its href."""
        return [
            ForegroundColor(self.text_style.link_color),
            Underline(),
            _OpenLink(element.attr(Tag.HREF)),
            *self._expand_element_or_children(element),
            _CLOSE_SCOPE,
            _CLOSE_SCOPE,
            _CLOSE_SCOPE,
        ]

    def _expand_paragraph(self, element: ElementNode) -> list[_WorkItem]:
        """Expand a paragraph followed by a blank line, skipping blank paragraphs."""
        if not element.text().strip():
            return []
        return [*self._expand_element_or_children(element), PARAGRAPH_SEPARATOR]

    def _expand_line_break(self, element: ElementNode) -> list[_WorkItem]:
        return [LINE_BREAK]

    def _expand_short_quotation(self, element: ElementNode) -> list[_WorkItem]:
        return [QUOTE_MARK, *self._expand_element_or_children(element), QUOTE_MARK]

    def _expand_blockquote(self, element: ElementNode) -> list[_WorkItem]:
        font_size = self.text_style.font_size
        return self._expand_styled(element, ParagraphIndent(first_line=font_size, rest_line=font_size))

    def _expand_list_items(self, element: ElementNode, ordered: bool) -> list[_WorkItem]:
        """Expand every ``li`` found anywhere below ``element``.

        The scan covers all descendants, not just direct children, so items of
        a nested list are matched by the outer list as well.

        """
        items = [child for child in element.iter_elements() if child.tag == Tag.LI]
        work: list[_WorkItem] = []
        for index, item in enumerate(items):
            prefix = f"{index + self.options.ordered_list_start}. " if ordered else self.options.bullet
            work.append(ParagraphIndent(rest_line=self._list_indent))
            work.append(prefix)
            work.extend(self._expand_element_or_children(item))
            work.append(_CLOSE_SCOPE)
        return work

    def _expand_unordered_list(self, element: ElementNode) -> list[_WorkItem]:
        return self._expand_list_items(element, ordered=False)

    def _expand_ordered_list(self, element: ElementNode) -> list[_WorkItem]:
        return self._expand_list_items(element, ordered=True)

    def _expand_description_list(self, element: ElementNode) -> list[_WorkItem]:
        """Expand terms and descriptions found anywhere below ``element``, indented."""
        font_size = self.text_style.font_size
        work: list[_WorkItem] = []
        for child in element.iter_elements():
            if child.tag == Tag.DT:
                indent = ParagraphIndent(rest_line=self._list_indent)
            elif child.tag == Tag.DD:
                indent = ParagraphIndent(
                    first_line=font_size * DD_FIRST_LINE_RATIO,
                    rest_line=font_size * DD_REST_LINE_RATIO,
                )
            else:
                continue
            work.extend(self._expand_styled(child, indent))
        return work


def convert(
    root: Node,
    text_style: TextStyle | None = None,
    options: HtmlOptions | None = None,
) -> AnnotatedStringBuilder:
    """Walk ``root`` and return the resulting annotated string builder.

    Parameters
    ----------
    root : Node
        Root of a sanitized node tree
    text_style : TextStyle or None, default = None
        Base text style supplying the font size for relative sizes
    options : HtmlOptions or None, default = None
        Conversion options

    Returns
    -------
    AnnotatedStringBuilder
        Builder holding the untrimmed result, all scopes closed

    """
    return StyleTreeWalker(text_style, options).walk(root)


__all__ = ["StyleTreeWalker", "convert"]
