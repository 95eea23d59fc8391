#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for html2annotated conversion.

Options are frozen dataclasses: they provide type safety and default values,
and are copied rather than mutated when a setting changes.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from html2annotated.options.base import BaseParserOptions, CloneFrozenMixin
from html2annotated.options.html import HtmlOptions


def create_updated_options(options: Any, **kwargs: Any) -> Any:
    """Create a new options instance with updated values.

    Parameters
    ----------
    options : Any
        The original options instance (must be a dataclass)
    **kwargs
        Keyword arguments with the field names and new values to update

    Returns
    -------
    Any
        A new options instance with the updated values

    Examples
    --------
    >>> original = HtmlOptions()
    >>> updated = create_updated_options(original, ordered_list_start=1)
    >>> # original remains unchanged, updated has new values

    """
    return replace(options, **kwargs)


__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "HtmlOptions",
    "create_updated_options",
]
