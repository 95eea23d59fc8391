#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2annotated/api.py
"""Public conversion entry points.

``html_to_annotated`` converts a markup string in one call.
``HtmlToAnnotatedString`` wraps a markup string as a value and memoizes its
conversion per text style, for callers that convert the same markup many
times (a list row re-rendered on every frame, for example).

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from html2annotated.annotated.styles import TextStyle
from html2annotated.annotated.text import AnnotatedText
from html2annotated.options.html import HtmlOptions
from html2annotated.parsers.html import HtmlToAnnotatedConverter

logger = logging.getLogger(__name__)


def html_to_annotated(
    html: Union[str, bytes],
    text_style: Optional[TextStyle] = None,
    options: Optional[HtmlOptions] = None,
) -> AnnotatedText:
    """Convert HTML markup to trimmed annotated text.

    Parameters
    ----------
    html : str or bytes
        HTML markup; bytes are decoded as UTF-8
    text_style : TextStyle or None, default = None
        Base text style supplying the font size and link colour
    options : HtmlOptions or None, default = None
        Conversion options

    Returns
    -------
    AnnotatedText
        The converted text with leading and trailing whitespace removed

    Raises
    ------
    ParsingError
        If sanitization or parsing fails
    DependencyError
        If a required package is missing
    InvalidOptionsError
        If ``options`` is not an ``HtmlOptions`` instance

    Examples
    --------
    >>> html_to_annotated("<p>Hello <i>there</i></p>").text
    'Hello there'

    """
    return HtmlToAnnotatedConverter(options, text_style).parse(html)


@dataclass(frozen=True)
class HtmlToAnnotatedString:
    """HTML markup held as a value, with its conversion cached per text style.

    The markup and options never change after construction, so a conversion
    result depends only on the ``TextStyle``. Results are computed on first
    request for a style and returned from the cache afterwards. The cache is
    not synchronised.

    Parameters
    ----------
    html : str
        HTML markup
    options : HtmlOptions or None, default = None
        Conversion options

    Examples
    --------
    >>> value = HtmlToAnnotatedString("<b>bold</b>")
    >>> first = value.to_annotated_string()
    >>> first is value.to_annotated_string()
    True

    """

    html: str
    options: Optional[HtmlOptions] = None
    _cache: dict[TextStyle, AnnotatedText] = field(default_factory=dict, init=False, repr=False, compare=False)

    def to_annotated_string(self, text_style: Optional[TextStyle] = None) -> AnnotatedText:
        """Return the annotated text for ``text_style``, converting at most once per style."""
        text_style = text_style or TextStyle()
        cached = self._cache.get(text_style)
        if cached is not None:
            return cached

        logger.debug("Converting %d characters of HTML for %r", len(self.html), text_style)
        result = html_to_annotated(self.html, text_style, self.options)
        self._cache[text_style] = result
        return result

    def __str__(self) -> str:
        return self.to_annotated_string().text


__all__ = ["html_to_annotated", "HtmlToAnnotatedString"]
