#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_annotated_text.py
"""Unit tests for AnnotatedText and the style attribute variants.

Tests cover:
- Range validation
- Subsequence slicing and clipping
- Style and link lookup by offset
- Run iteration
- Style variant validation

"""

from dataclasses import fields

import pytest
from hypothesis import given

from html2annotated.annotated import (
    AnnotatedText,
    BaselineShift,
    Bold,
    FontSizeScale,
    ForegroundColor,
    Italic,
    ParagraphIndent,
    Range,
    Run,
    TextStyle,
    Underline,
    is_paragraph_style,
)
from utils import annotated_texts


@pytest.mark.unit
class TestConstruction:
    """Tests for AnnotatedText construction and validation."""

    def test_empty(self) -> None:
        """Test the empty annotated text."""
        empty = AnnotatedText.empty()
        assert empty.text == ""
        assert empty.styles == ()
        assert empty.links == ()
        assert len(empty) == 0

    def test_str_and_plain_text(self) -> None:
        """Test that str() and plain_text return the text."""
        text = AnnotatedText("abc", styles=(Range(Bold(), 0, 1),))
        assert str(text) == "abc"
        assert text.plain_text == "abc"

    def test_range_past_end_rejected(self) -> None:
        """Test that a range beyond the text length is rejected."""
        with pytest.raises(ValueError):
            AnnotatedText("ab", styles=(Range(Bold(), 0, 3),))

    @pytest.mark.parametrize("start,end", [(-1, 1), (2, 1)])
    def test_invalid_range(self, start: int, end: int) -> None:
        """Test that negative or reversed ranges are rejected."""
        with pytest.raises(ValueError):
            Range(Bold(), start, end)

    def test_range_covers(self) -> None:
        """Test half-open coverage."""
        annotation = Range(Bold(), 1, 3)
        assert not annotation.covers(0)
        assert annotation.covers(1)
        assert annotation.covers(2)
        assert not annotation.covers(3)


@pytest.mark.unit
class TestSubsequence:
    """Tests for slicing annotated text."""

    def test_slice_rebases_and_clips(self) -> None:
        """Test that ranges are shifted and clipped to the slice."""
        text = AnnotatedText(
            "abcdef",
            styles=(Range(Bold(), 0, 3), Range(Italic(), 4, 6)),
            links=(Range("u", 2, 5),),
        )

        result = text.subsequence(1, 4)

        assert result.text == "bcd"
        assert result.styles == (Range(Bold(), 0, 2),)
        assert result.links == (Range("u", 1, 3),)

    def test_full_slice_returns_self(self) -> None:
        """Test that slicing the whole text returns the same object."""
        text = AnnotatedText("abc")
        assert text.subsequence(0, 3) is text

    @pytest.mark.parametrize("start,end", [(-1, 2), (2, 1), (0, 4)])
    def test_invalid_bounds(self, start: int, end: int) -> None:
        """Test that out-of-range slices raise IndexError."""
        with pytest.raises(IndexError):
            AnnotatedText("abc").subsequence(start, end)


@pytest.mark.unit
class TestLookup:
    """Tests for per-offset style and link lookup."""

    def test_styles_at_outermost_first(self) -> None:
        """Test that nested styles are reported in push order."""
        text = AnnotatedText("abc", styles=(Range(Bold(), 0, 3), Range(Italic(), 1, 2)))

        assert text.styles_at(0) == (Bold(),)
        assert text.styles_at(1) == (Bold(), Italic())
        assert text.styles_at(3) == ()

    def test_links_at(self) -> None:
        """Test link lookup by offset."""
        text = AnnotatedText("go here", links=(Range("http://x", 0, 2),))
        assert text.links_at(1) == ("http://x",)
        assert text.links_at(3) == ()


@pytest.mark.unit
class TestRuns:
    """Tests for iterating runs of uniformly annotated text."""

    def test_runs_split_at_boundaries(self) -> None:
        """Test that runs break wherever the annotation set changes."""
        text = AnnotatedText("abcd", styles=(Range(Bold(), 1, 3),), links=(Range("u", 2, 4),))

        runs = list(text.iter_runs())

        assert runs == [
            Run(0, 1, "a"),
            Run(1, 2, "b", (Bold(),)),
            Run(2, 3, "c", (Bold(),), ("u",)),
            Run(3, 4, "d", (), ("u",)),
        ]

    def test_adjacent_equal_runs_merge(self) -> None:
        """Test that a boundary with no change in annotations does not split a run."""
        text = AnnotatedText("abcd", styles=(Range(Bold(), 0, 2), Range(Bold(), 2, 4)))
        runs = list(text.iter_runs())

        assert [run.text for run in runs] == ["abcd"]
        assert len(runs) == 1
        assert runs[0] == Run(0, 4, "abcd", (Bold(),))

    def test_empty_text_has_no_runs(self) -> None:
        """Test that empty text yields no runs."""
        assert list(AnnotatedText.empty().iter_runs()) == []

    @given(annotated_texts())
    def test_runs_partition_text(self, text: AnnotatedText) -> None:
        """Property: runs are contiguous, non-empty and reassemble the text."""
        runs = list(text.iter_runs())
        assert "".join(run.text for run in runs) == text.text
        position = 0
        for run in runs:
            assert run.start == position
            assert run.end > run.start
            position = run.end


@pytest.mark.unit
class TestStyles:
    """Tests for the style attribute variants."""

    def test_variants_hashable_and_equal(self) -> None:
        """Test that style values compare and hash by value."""
        assert Bold() == Bold()
        assert len({Underline(), Underline(), ForegroundColor("#fff")}) == 2

    def test_baseline_shift_rejects_unknown_direction(self) -> None:
        """Test that only superscript and subscript are accepted."""
        with pytest.raises(ValueError):
            BaselineShift("sideways", 0.66)

    def test_relative_sizes_are_plain_factors(self) -> None:
        """Test that relative size variants carry only their scale factors."""
        assert [f.name for f in fields(FontSizeScale)] == ["factor"]
        assert [f.name for f in fields(BaselineShift)] == ["direction", "size_scale"]

    def test_text_style_rejects_non_positive_size(self) -> None:
        """Test that the base font size must be positive."""
        with pytest.raises(ValueError):
            TextStyle(font_size=0)

    def test_paragraph_style_classification(self) -> None:
        """Test that only indents are paragraph-level."""
        assert is_paragraph_style(ParagraphIndent(1.0, 2.0))
        assert not is_paragraph_style(Bold())
