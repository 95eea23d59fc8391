#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2annotated/dom.py
"""Minimal read-only node tree consumed by the style tree walker.

The walker never sees parser objects directly. The HTML front end adapts a
sanitized BeautifulSoup tree into these two node types, and tests can build
trees by hand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(frozen=True)
class TextNode:
    """A run of literal text.

    Parameters
    ----------
    text : str
        The text content

    """

    text: str


@dataclass(frozen=True)
class ElementNode:
    """An element with a tag name, attributes and ordered children.

    Parameters
    ----------
    tag : str
        Tag name as produced by the sanitizer (lower case)
    attributes : dict, default = empty dict
        Attribute name to value mapping
    children : tuple of Node, default = ()
        Child nodes in document order

    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict, hash=False)
    children: tuple[Node, ...] = ()

    def attr(self, name: str, default: str = "") -> str:
        """Return the value of attribute ``name``, or ``default`` if absent."""
        return self.attributes.get(name, default)

    def text(self) -> str:
        """Return the flattened text: all descendant text nodes concatenated."""
        parts: list[str] = []
        stack: list[Node] = list(reversed(self.children))
        while stack:
            node = stack.pop()
            if isinstance(node, TextNode):
                parts.append(node.text)
            else:
                stack.extend(reversed(node.children))
        return "".join(parts)

    def iter_elements(self) -> Iterator[ElementNode]:
        """Yield this element and every descendant element in document order."""
        stack: list[ElementNode] = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(child for child in reversed(element.children) if isinstance(child, ElementNode))


Node = Union[TextNode, ElementNode]


def element(tag: str, *children: Union[Node, str], **attributes: str) -> ElementNode:
    """Build an element, wrapping plain strings in text nodes.

    Examples
    --------
    >>> element("a", "go", href="http://x").text()
    'go'

    """
    nodes = tuple(TextNode(child) if isinstance(child, str) else child for child in children)
    return ElementNode(tag, dict(attributes), nodes)


__all__ = ["Node", "TextNode", "ElementNode", "element"]
