#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2annotated/parsers/base.py
"""Base classes for markup parsers.

This module defines the abstract base class that markup parsers inherit
from. A parser turns source markup into ``AnnotatedText``.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Union

from html2annotated.annotated.text import AnnotatedText
from html2annotated.exceptions import InvalidOptionsError, ValidationError
from html2annotated.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all markup parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from html2annotated.annotated import AnnotatedText
        >>> from html2annotated.parsers.base import BaseParser
        >>>
        >>> class PlainParser(BaseParser):
        ...     def parse(self, input_data):
        ...         return AnnotatedText(self._load_text_content(input_data)).trim()

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, bytes]) -> AnnotatedText:
        """Parse markup into trimmed annotated text.

        Parameters
        ----------
        input_data : str or bytes
            Markup as text, or as UTF-8 encoded bytes

        Returns
        -------
        AnnotatedText
            The converted text

        Raises
        ------
        ParsingError
            If the markup cannot be sanitized or parsed
        DependencyError
            If required dependencies are not installed
        ValidationError
            If the input type is not supported

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: Union[str, bytes]) -> str:
        """Return ``input_data`` as text, decoding bytes as UTF-8.

        Undecodable bytes are replaced rather than rejected.

        Raises
        ------
        ValidationError
            If ``input_data`` is neither str nor bytes

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, (bytes, bytearray)):
            text = bytes(input_data).decode("utf-8", errors="replace")
            if "�" in text:
                logger.debug("Input bytes were not valid UTF-8; undecodable sequences replaced")
            return text
        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}. Expected str or bytes.",
            parameter_name="input_data",
            parameter_value=type(input_data),
        )
