#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML to annotated text conversion.

This module defines the options for the HTML front end (sanitization and
parsing) and for the style tree walker (list numbering, bullets and relative
sizes).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from html2annotated.constants import (
    BASELINE_SHIFT_SCALE_FACTOR,
    DEFAULT_BULLET,
    DEFAULT_HTML_COLLAPSE_WHITESPACE,
    DEFAULT_HTML_PARSER,
    DEFAULT_INVERT_BASELINE_SHIFT,
    DEFAULT_ORDERED_LIST_START,
    DEFAULT_PRESERVE_RELATIVE_LINKS,
    DEFAULT_SANITIZE,
    SMALL_SCALE_FACTOR,
    HtmlParser,
)
from html2annotated.options.base import BaseParserOptions


# src/html2annotated/options/html.py
@dataclass(frozen=True)
class HtmlOptions(BaseParserOptions):
    """Configuration options for HTML to annotated text conversion.

    The defaults reproduce the established conversion output exactly,
    including zero-based ordered list numbers and the inverted baseline shift
    of ``<sub>`` and ``<sup>``.

    Parameters
    ----------
    sanitize : bool, default True
        Clean the markup against the safe tag/attribute/protocol allowlist
        before parsing. Disable only for markup that is already sanitized.
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup parser backend.
    collapse_whitespace : bool, default True
        Collapse runs of whitespace in text nodes to a single space, except
        inside ``<pre>``.
    preserve_relative_links : bool, default False
        Keep ``href``/``src``/``cite`` values without a scheme. When False,
        relative URLs are removed during sanitization unless ``base_url``
        makes them absolute.
    base_url : str or None, default None
        Base URL used to resolve relative URLs before protocol checks.
    ordered_list_start : int, default 0
        Number given to the first item of an ordered list.
    bullet : str, default "• "
        Prefix emitted before each unordered list item.
    invert_baseline_shift : bool, default True
        Shift ``<sub>`` up and ``<sup>`` down. Set to False for the
        conventional direction.
    small_scale_factor : float, default 0.75
        Font size factor for ``<small>``.
    baseline_shift_scale_factor : float, default 0.66
        Font size factor for ``<sub>`` and ``<sup>``.

    Examples
    --------
    Number ordered lists from one:
        >>> options = HtmlOptions(ordered_list_start=1)

    Convert trusted, pre-sanitized markup with lxml:
        >>> options = HtmlOptions(sanitize=False, html_parser="lxml")

    """

    sanitize: bool = field(
        default=DEFAULT_SANITIZE,
        metadata={"help": "Sanitize markup against the safe allowlist before parsing", "importance": "security"},
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": (
                "BeautifulSoup parser to use: 'html.parser' (built-in), "
                "'html5lib' (standards-compliant, slower), 'lxml' (fast, requires C library)"
            ),
            "choices": ["html.parser", "html5lib", "lxml"],
            "importance": "advanced",
        },
    )
    collapse_whitespace: bool = field(
        default=DEFAULT_HTML_COLLAPSE_WHITESPACE,
        metadata={"help": "Collapse multiple spaces/newlines into single spaces outside <pre>", "importance": "core"},
    )
    preserve_relative_links: bool = field(
        default=DEFAULT_PRESERVE_RELATIVE_LINKS,
        metadata={"help": "Keep relative URLs instead of removing them during sanitization", "importance": "security"},
    )
    base_url: str | None = field(
        default=None,
        metadata={"help": "Base URL for resolving relative hrefs before sanitization", "importance": "advanced"},
    )
    ordered_list_start: int = field(
        default=DEFAULT_ORDERED_LIST_START,
        metadata={"help": "Number of the first item in ordered lists", "importance": "core"},
    )
    bullet: str = field(
        default=DEFAULT_BULLET,
        metadata={"help": "Prefix emitted before unordered list items", "importance": "advanced"},
    )
    invert_baseline_shift: bool = field(
        default=DEFAULT_INVERT_BASELINE_SHIFT,
        metadata={"help": "Raise <sub> and lower <sup> text", "importance": "advanced"},
    )
    small_scale_factor: float = field(
        default=SMALL_SCALE_FACTOR,
        metadata={"help": "Font size factor for <small>", "type": float, "importance": "advanced"},
    )
    baseline_shift_scale_factor: float = field(
        default=BASELINE_SHIFT_SCALE_FACTOR,
        metadata={"help": "Font size factor for <sub> and <sup>", "type": float, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and choices.

        Raises
        ------
        ValueError
            If a scale factor is not positive or the parser is unknown.

        """
        super().__post_init__()

        if self.small_scale_factor <= 0:
            raise ValueError(f"small_scale_factor must be positive, got {self.small_scale_factor}")
        if self.baseline_shift_scale_factor <= 0:
            raise ValueError(f"baseline_shift_scale_factor must be positive, got {self.baseline_shift_scale_factor}")
        if self.html_parser not in ("html.parser", "html5lib", "lxml"):
            raise ValueError(f"Unsupported html_parser: {self.html_parser}")
