#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for converter options.

This module defines the foundation classes for the option dataclasses used
by the html2annotated conversion pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-with-changes for frozen option dataclasses.

    Frozen options cannot be assigned to, so a changed setting means a new
    instance. ``__post_init__`` validation runs again on the copy.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        Parameters
        ----------
        **kwargs : Any
            Field names mapped to replacement values

        Returns
        -------
        Self
            The validated copy

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers turn source markup into annotated text. Subclasses define
    format-specific options as frozen dataclass fields whose ``metadata``
    carries a ``help`` string.

    """

    def __post_init__(self) -> None:
        """Validate field values.

        Subclasses extend this to check numeric ranges and dependent fields.

        """
        pass
