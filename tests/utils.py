"""Test utilities for the html2annotated test suite.

This module provides Hypothesis strategies for annotated text and helpers for
inspecting conversion results.
"""

from hypothesis import strategies as st

from html2annotated.annotated import AnnotatedText, Bold, Italic, ParagraphIndent, Range

# Characters mixing content with ASCII and non-ASCII whitespace
WHITESPACE_HEAVY_ALPHABET = list("ab \n\t\u00a0x")

_STYLES = st.sampled_from([Bold(), Italic(), ParagraphIndent(first_line=7.0, rest_line=7.0)])
_LINKS = st.sampled_from(["", "http://x"])


@st.composite
def annotated_texts(draw, max_size: int = 30):
    """Generate annotated text with whitespace-heavy content and arbitrary ranges."""
    text = draw(st.text(alphabet=st.sampled_from(WHITESPACE_HEAVY_ALPHABET), max_size=max_size))

    def ranges(items):
        bounds = st.tuples(st.integers(0, len(text)), st.integers(0, len(text))).map(sorted)
        return st.lists(st.tuples(items, bounds), max_size=5).map(
            lambda entries: tuple(Range(item, lo, hi) for item, (lo, hi) in entries)
        )

    return AnnotatedText(text, styles=draw(ranges(_STYLES)), links=draw(ranges(_LINKS)))


def ranges_of(text: AnnotatedText, style_type: type) -> list[tuple[int, int]]:
    """Return the (start, end) pairs of every style range of ``style_type``."""
    return [(r.start, r.end) for r in text.styles if isinstance(r.item, style_type)]


def styles_of(text: AnnotatedText, style_type: type) -> list:
    """Return every style value of ``style_type`` in push order."""
    return [r.item for r in text.styles if isinstance(r.item, style_type)]
