#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/parsers/base.py
"""Abstract base parser for semdiff.

This module defines the abstract base class that every format parser
inherits from. Parsers are pure: they take raw text, return a canonical
value and touch no shared state.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Union

from semdiff.exceptions import InvalidOptionsError, ParsingError, ValidationError
from semdiff.model import Value, from_python
from semdiff.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all format parsers.

    Subclasses set ``format_name`` and implement :meth:`parse`, returning a
    canonical :class:`~semdiff.model.Value` or raising :class:`ParsingError`.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options. If None, default options are used.

    Examples
    --------
        >>> class MyParser(BaseParser):
        ...     format_name = "mine"
        ...     def parse(self, text):
        ...         return self._to_value(self._ensure_text(text).split())

    """

    format_name: ClassVar[str] = ""

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
                parser_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, text: Union[str, bytes]) -> Value:
        """Parse raw text into a canonical value.

        Parameters
        ----------
        text : str or bytes
            Document content. Bytes are decoded as UTF-8 (a leading BOM is
            dropped).

        Returns
        -------
        Value
            The canonical representation of the document

        Raises
        ------
        ParsingError
            If the text is not valid for this format

        """

    def _ensure_text(self, text: Union[str, bytes]) -> str:
        """Return ``text`` as ``str``, decoding bytes as UTF-8."""
        if isinstance(text, str):
            return text[1:] if text.startswith("\ufeff") else text
        if isinstance(text, (bytes, bytearray)):
            try:
                return bytes(text).decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise ParsingError(
                    f"{self.format_name.upper()} input is not valid UTF-8: {e}",
                    format_name=self.format_name,
                    parsing_stage="decoding",
                    original_error=e,
                ) from e
        raise ValidationError(
            f"Parser input must be str or bytes, got {type(text).__name__}",
            parameter_name="text",
            parameter_value=text,
        )

    def _to_value(self, data: Any) -> Value:
        """Convert library output into a canonical value.

        Raises
        ------
        ParsingError
            If the data cannot be represented (unsupported type or nesting
            too deep for the interpreter)

        """
        try:
            return from_python(data)
        except ValidationError as e:
            raise ParsingError(
                f"Cannot represent {self.format_name.upper()} data: {e.message}",
                format_name=self.format_name,
                parsing_stage="conversion",
                original_error=e,
            ) from e

    def _error(
        self,
        message: str,
        original_error: Exception | None = None,
        line: int | None = None,
        column: int | None = None,
        parsing_stage: str = "syntax",
    ) -> ParsingError:
        """Build a :class:`ParsingError` tagged with this parser's format."""
        location = ""
        if line is not None:
            location = f" (line {line}" + (f", column {column})" if column is not None else ")")
        logger.debug(f"{self.format_name} parse failure at stage {parsing_stage}: {message}")
        return ParsingError(
            f"Invalid {self.format_name.upper()}{location}: {message}",
            format_name=self.format_name,
            line=line,
            column=column,
            parsing_stage=parsing_stage,
            original_error=original_error,
        )
