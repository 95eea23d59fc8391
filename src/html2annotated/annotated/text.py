#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2annotated/annotated/text.py
"""Immutable annotated text and its post-processing operations.

``AnnotatedText`` is the final product handed to a rendering collaborator:
plain text plus two tuples of half-open ranges, one carrying style
attributes and one carrying opaque link targets. Ranges are kept in the
order their scopes were opened.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Iterator, TypeVar, Union

from html2annotated.annotated.styles import StyleAttribute

if TYPE_CHECKING:
    from html2annotated.annotated.builder import AnnotatedStringBuilder

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Range(Generic[T]):
    """A half-open ``[start, end)`` range of text carrying one annotation.

    Parameters
    ----------
    item : T
        The annotation payload (a style attribute or a link target)
    start : int
        Offset of the first annotated character
    end : int
        Offset one past the last annotated character

    """

    item: T
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid range [{self.start}, {self.end})")

    def covers(self, index: int) -> bool:
        """Check whether the character at ``index`` lies inside this range."""
        return self.start <= index < self.end


@dataclass(frozen=True)
class Run:
    """A maximal span of text sharing the same set of annotations.

    Parameters
    ----------
    start : int
        Offset of the first character of the run
    end : int
        Offset one past the last character of the run
    text : str
        The text of the run
    styles : tuple of StyleAttribute
        Styles covering the whole run, outermost first
    links : tuple of str
        Link targets covering the whole run, outermost first

    """

    start: int
    end: int
    text: str
    styles: tuple[StyleAttribute, ...] = ()
    links: tuple[str, ...] = ()


def _slice_ranges(ranges: tuple[Range[T], ...], start: int, end: int) -> tuple[Range[T], ...]:
    # Overlapping ranges are clipped; empty ranges survive only inside the slice
    result = []
    for annotation in ranges:
        lo = max(annotation.start, start)
        hi = min(annotation.end, end)
        if lo < hi or (annotation.start == annotation.end and start <= annotation.start <= end):
            result.append(Range(annotation.item, lo - start, hi - start))
    return tuple(result)


@dataclass(frozen=True)
class AnnotatedText:
    """Immutable text with style and link annotations.

    Parameters
    ----------
    text : str
        The plain text content
    styles : tuple of Range[StyleAttribute], default ()
        Style annotations over ``text``
    links : tuple of Range[str], default ()
        Link annotations over ``text``; each payload is an opaque target string

    Examples
    --------
    >>> from html2annotated.annotated.styles import Bold
    >>> text = AnnotatedText("  hi  ", styles=(Range(Bold(), 2, 4),))
    >>> text.trim()
    AnnotatedText(text='hi', styles=(Range(item=Bold(), start=0, end=2),), links=())

    """

    text: str
    styles: tuple[Range[StyleAttribute], ...] = ()
    links: tuple[Range[str], ...] = ()

    def __post_init__(self) -> None:
        length = len(self.text)
        for annotation in (*self.styles, *self.links):
            if annotation.end > length:
                raise ValueError(f"Annotation range [{annotation.start}, {annotation.end}) exceeds text length {length}")

    @classmethod
    def empty(cls) -> AnnotatedText:
        """Return an annotated text with no text and no annotations."""
        return cls("")

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    @property
    def plain_text(self) -> str:
        """The text content without any annotations."""
        return self.text

    def subsequence(self, start: int, end: int) -> AnnotatedText:
        """Return the slice ``[start, end)`` with annotations re-expressed relative to it.

        Annotations entirely outside the slice are dropped and annotations
        crossing a slice boundary are clipped to it.

        Parameters
        ----------
        start : int
            Start offset of the slice (inclusive)
        end : int
            End offset of the slice (exclusive)

        Returns
        -------
        AnnotatedText
            The sliced annotated text

        Raises
        ------
        IndexError
            If the offsets are outside the text or reversed

        """
        if not 0 <= start <= end <= len(self.text):
            raise IndexError(f"Invalid subsequence [{start}, {end}) of text with length {len(self.text)}")
        if start == 0 and end == len(self.text):
            return self
        return AnnotatedText(
            self.text[start:end],
            styles=_slice_ranges(self.styles, start, end),
            links=_slice_ranges(self.links, start, end),
        )

    def trim(self) -> AnnotatedText:
        """Remove leading and trailing whitespace, keeping annotations aligned.

        See Also
        --------
        trim : Module-level equivalent.

        """
        return trim(self)

    def styles_at(self, index: int) -> tuple[StyleAttribute, ...]:
        """Return the styles covering the character at ``index``, outermost first."""
        return tuple(annotation.item for annotation in self.styles if annotation.covers(index))

    def links_at(self, index: int) -> tuple[str, ...]:
        """Return the link targets covering the character at ``index``, outermost first."""
        return tuple(annotation.item for annotation in self.links if annotation.covers(index))

    def iter_runs(self) -> Iterator[Run]:
        """Iterate over maximal runs of text sharing the same annotations.

        Runs partition the text: they are contiguous, non-empty and cover
        every character exactly once.

        Yields
        ------
        Run
            The next run in text order

        """
        length = len(self.text)
        if not length:
            return

        boundaries = {0, length}
        for annotation in (*self.styles, *self.links):
            boundaries.add(annotation.start)
            boundaries.add(annotation.end)
        edges = sorted(boundaries)

        pending: Run | None = None
        for lo, hi in zip(edges, edges[1:]):
            if lo == hi:
                continue
            styles = tuple(a.item for a in self.styles if a.start <= lo and hi <= a.end)
            links = tuple(a.item for a in self.links if a.start <= lo and hi <= a.end)
            if pending is not None and pending.styles == styles and pending.links == links:
                pending = Run(pending.start, hi, self.text[pending.start : hi], styles, links)
                continue
            if pending is not None:
                yield pending
            pending = Run(lo, hi, self.text[lo:hi], styles, links)

        if pending is not None:
            yield pending


def trim(text: Union[AnnotatedText, AnnotatedStringBuilder]) -> AnnotatedText:
    """Strip leading and trailing whitespace from annotated text.

    Two cursors start at the ends of the text. The start cursor advances while
    its character is whitespace, then the end cursor retreats while its
    character is whitespace. Only the trimmed characters are inspected, so the
    scan is linear in the amount of edge whitespace rather than in the text
    length.

    Parameters
    ----------
    text : AnnotatedText or AnnotatedStringBuilder
        The annotated text to trim. A builder is built first, which requires
        all of its scopes to be closed.

    Returns
    -------
    AnnotatedText
        The text between the first and last non-whitespace characters, with
        annotations re-expressed relative to it. Empty or all-whitespace input
        yields an empty result with no annotations.

    Examples
    --------
    >>> trim(AnnotatedText("\\n\\n A \\n\\n")).text
    'A'
    >>> trim(AnnotatedText("   ")) == AnnotatedText.empty()
    True

    """
    if not isinstance(text, AnnotatedText):
        text = text.to_annotated_text()

    content = text.text
    start = 0
    end = len(content) - 1

    while start <= end and content[start].isspace():
        start += 1
    while end >= start and content[end].isspace():
        end -= 1

    if start > end:
        if content:
            logger.debug("Annotated text of length %d is entirely whitespace", len(content))
        return AnnotatedText.empty()

    return text.subsequence(start, end + 1)


__all__ = ["AnnotatedText", "Range", "Run", "trim"]
