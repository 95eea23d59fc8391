#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2annotated/annotated/builder.py
"""Builder for constructing annotated text with strictly nested scopes.

The builder is the mutable buffer the tree walker writes into. Text is
append-only. Style and link annotations are opened with a push and closed
with a pop in LIFO order; a scope's range runs from the text length at push
time to the text length at pop time.

"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, Literal

from html2annotated.annotated.styles import StyleAttribute
from html2annotated.annotated.text import AnnotatedText, Range
from html2annotated.exceptions import AnnotationScopeError

_ScopeKind = Literal["style", "link"]


class AnnotatedStringBuilder:
    """Append-only text buffer with a stack of open annotation scopes.

    Examples
    --------
    >>> from html2annotated.annotated.styles import Bold
    >>> builder = AnnotatedStringBuilder()
    >>> with builder.style(Bold()):
    ...     builder.append("hi")
    >>> builder.append(" there")
    >>> builder.to_annotated_text().styles
    (Range(item=Bold(), start=0, end=2),)

    """

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self._chunks: list[str] = []
        self._length = 0
        # Each entry is [item, start, end]; end stays None while the scope is open
        self._styles: list[list] = []
        self._links: list[list] = []
        self._stack: list[tuple[_ScopeKind, int]] = []

    def __len__(self) -> int:
        return self._length

    @property
    def length(self) -> int:
        """Current length of the text."""
        return self._length

    @property
    def open_scopes(self) -> int:
        """Number of scopes that have been pushed and not yet popped."""
        return len(self._stack)

    def append(self, text: str) -> None:
        """Append ``text`` to the end of the buffer."""
        if text:
            self._chunks.append(text)
            self._length += len(text)

    def push_style(self, style: StyleAttribute) -> int:
        """Open a style scope at the current end of the text.

        Returns
        -------
        int
            The scope depth before the push, usable with :meth:`pop_to`

        """
        depth = len(self._stack)
        self._styles.append([style, self._length, None])
        self._stack.append(("style", len(self._styles) - 1))
        return depth

    def push_link(self, target: str) -> int:
        """Open a link scope carrying ``target`` at the current end of the text.

        Returns
        -------
        int
            The scope depth before the push, usable with :meth:`pop_to`

        """
        depth = len(self._stack)
        self._links.append([target, self._length, None])
        self._stack.append(("link", len(self._links) - 1))
        return depth

    def pop(self) -> None:
        """Close the most recently opened scope.

        Raises
        ------
        AnnotationScopeError
            If no scope is open

        """
        if not self._stack:
            raise AnnotationScopeError("pop() called with no open style or link scope")
        kind, index = self._stack.pop()
        entries = self._styles if kind == "style" else self._links
        entries[index][2] = self._length

    def pop_to(self, depth: int) -> None:
        """Close scopes until exactly ``depth`` scopes remain open.

        Raises
        ------
        AnnotationScopeError
            If fewer than ``depth`` scopes are open

        """
        if depth < 0 or depth > len(self._stack):
            raise AnnotationScopeError(
                f"Cannot pop to depth {depth} with {len(self._stack)} open scopes", open_scopes=len(self._stack)
            )
        while len(self._stack) > depth:
            self.pop()

    @contextmanager
    def style(self, style: StyleAttribute) -> Generator[None, None, None]:
        """Apply ``style`` to everything appended inside the ``with`` block."""
        depth = self.push_style(style)
        try:
            yield
        finally:
            self.pop_to(depth)

    @contextmanager
    def link(self, target: str) -> Generator[None, None, None]:
        """Attach a link to ``target`` to everything appended inside the ``with`` block."""
        depth = self.push_link(target)
        try:
            yield
        finally:
            self.pop_to(depth)

    def to_annotated_text(self) -> AnnotatedText:
        """Build the immutable annotated text.

        Raises
        ------
        AnnotationScopeError
            If any scope is still open

        """
        if self._stack:
            raise AnnotationScopeError(
                f"Cannot build annotated text with {len(self._stack)} open scope(s)", open_scopes=len(self._stack)
            )
        text = "".join(self._chunks)
        # Join once so that later appends are cheap
        self._chunks = [text] if text else []
        return AnnotatedText(
            text,
            styles=tuple(Range(item, start, end) for item, start, end in self._styles),
            links=tuple(Range(item, start, end) for item, start, end in self._links),
        )


__all__ = ["AnnotatedStringBuilder"]
