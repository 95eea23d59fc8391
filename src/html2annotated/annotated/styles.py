#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2annotated/annotated/styles.py
"""Style attribute variants attached to ranges of annotated text.

Each presentational effect is its own small frozen dataclass, and
``StyleAttribute`` is the union of all of them. A rendering collaborator is
expected to understand every variant. Sizes are either relative (scale
factors of the base font size carried by ``TextStyle``) or absolute
(paragraph indents, computed by the walker from the base font size).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from html2annotated.constants import (
    BASELINE_SUBSCRIPT,
    BASELINE_SUPERSCRIPT,
    DEFAULT_FONT_SIZE,
    DEFAULT_LINK_COLOR,
    BaselineDirection,
)


@dataclass(frozen=True)
class TextStyle:
    """Base text style supplying the context for relative sizes.

    Parameters
    ----------
    font_size : float, default 14.0
        Ambient font size. Indent widths and scaled sizes derive from it.
    link_color : str, default "#0000ff"
        Foreground colour applied to hyperlinks.

    """

    font_size: float = field(
        default=DEFAULT_FONT_SIZE,
        metadata={"help": "Ambient font size used for relative size computations"},
    )
    link_color: str = field(
        default=DEFAULT_LINK_COLOR,
        metadata={"help": "Foreground colour for hyperlinks"},
    )

    def __post_init__(self) -> None:
        """Validate the base font size.

        Raises
        ------
        ValueError
            If font_size is not positive.

        """
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")


@dataclass(frozen=True)
class Bold:
    """Bold font weight."""


@dataclass(frozen=True)
class Italic:
    """Italic font style."""


@dataclass(frozen=True)
class Underline:
    """Underline text decoration."""


@dataclass(frozen=True)
class LineThrough:
    """Strikethrough text decoration."""


@dataclass(frozen=True)
class Monospace:
    """Monospace font family."""


@dataclass(frozen=True)
class FontSizeScale:
    """Font size relative to the base font size.

    Parameters
    ----------
    factor : float
        Multiplier applied to the base font size

    """

    factor: float


@dataclass(frozen=True)
class BaselineShift:
    """Raised or lowered baseline with a reduced font size.

    Parameters
    ----------
    direction : {"superscript", "subscript"}
        Direction of the shift
    size_scale : float
        Multiplier applied to the base font size

    """

    direction: BaselineDirection
    size_scale: float

    def __post_init__(self) -> None:
        if self.direction not in (BASELINE_SUPERSCRIPT, BASELINE_SUBSCRIPT):
            raise ValueError(f"Unsupported baseline direction: {self.direction}")


@dataclass(frozen=True)
class ForegroundColor:
    """Foreground (text) colour.

    Parameters
    ----------
    value : str
        Colour value, e.g. ``"#0000ff"``

    """

    value: str


@dataclass(frozen=True)
class ParagraphIndent:
    """Paragraph-level text indentation in absolute size units.

    Parameters
    ----------
    first_line : float, default 0.0
        Indent of the first line of the paragraph
    rest_line : float, default 0.0
        Indent of every following line

    """

    first_line: float = 0.0
    rest_line: float = 0.0


StyleAttribute = Union[
    Bold,
    Italic,
    Underline,
    LineThrough,
    Monospace,
    FontSizeScale,
    BaselineShift,
    ForegroundColor,
    ParagraphIndent,
]

STYLE_TYPES: dict[str, type] = {
    cls.__name__: cls
    for cls in (
        Bold,
        Italic,
        Underline,
        LineThrough,
        Monospace,
        FontSizeScale,
        BaselineShift,
        ForegroundColor,
        ParagraphIndent,
    )
}

# ParagraphIndent is the only paragraph-level style; the rest apply to spans
PARAGRAPH_STYLE_TYPES = (ParagraphIndent,)


def is_paragraph_style(style: StyleAttribute) -> bool:
    """Check whether ``style`` applies to whole paragraphs rather than spans."""
    return isinstance(style, PARAGRAPH_STYLE_TYPES)


__all__ = [
    "TextStyle",
    "Bold",
    "Italic",
    "Underline",
    "LineThrough",
    "Monospace",
    "FontSizeScale",
    "BaselineShift",
    "ForegroundColor",
    "ParagraphIndent",
    "StyleAttribute",
    "STYLE_TYPES",
    "is_paragraph_style",
]
