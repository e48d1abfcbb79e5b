#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/parsers/toml.py
"""TOML to canonical value parser.

Tables become Objects and arrays (including arrays of tables) become Arrays.
TOML integers and floats both map to Number; offset/local date-times, dates
and times become ISO-8601 strings.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

from semdiff.format_registry import FormatMetadata
from semdiff.model import Value
from semdiff.options.toml import TomlParserOptions
from semdiff.parsers.base import BaseParser

try:
    import tomllib
except ImportError:  # Python < 3.11
    import tomli as tomllib

logger = logging.getLogger(__name__)

_POSITION_PATTERN = re.compile(r"\(at line (\d+), column (\d+)\)")


class TomlParser(BaseParser):
    r"""Parse TOML text into a canonical value.

    Parameters
    ----------
    options : TomlParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> TomlParser().parse('[user]\nname = "Alice"')
        Object(fields={'user': Object(fields={'name': String(value='Alice')})})

    """

    format_name = "toml"

    def __init__(self, options: TomlParserOptions | None = None):
        """Initialize the TOML parser with options."""
        BaseParser._validate_options_type(options, TomlParserOptions, "toml")
        options = options or TomlParserOptions()
        super().__init__(options)
        self.options: TomlParserOptions = options

    def parse(self, text: Union[str, bytes]) -> Value:
        """Parse TOML text.

        Raises
        ------
        ParsingError
            If the text is not valid TOML; line and column are reported when
            the TOML library provides them

        """
        content = self._ensure_text(text)
        parse_float = str if self.options.float_as_decimal_string else float

        try:
            data = tomllib.loads(content, parse_float=parse_float)
        except tomllib.TOMLDecodeError as e:
            line, column = _error_position(e)
            message = _POSITION_PATTERN.sub("", getattr(e, "msg", None) or str(e)).strip()
            raise self._error(message, original_error=e, line=line, column=column) from e

        logger.debug(f"Loaded TOML document with {len(data)} top-level key(s)")
        return self._to_value(data)


def _error_position(error: Exception) -> tuple[Optional[int], Optional[int]]:
    line = getattr(error, "lineno", None)
    column = getattr(error, "colno", None)
    if line is not None:
        return line, column
    match = _POSITION_PATTERN.search(str(error))
    if match:
        return int(match.group(1)), int(match.group(2))
    return None, None


def parse_toml(text: Union[str, bytes], options: Optional[TomlParserOptions] = None) -> Value:
    """Parse TOML text into a canonical value.

    Raises
    ------
    ParsingError
        If the text is not valid TOML

    """
    return TomlParser(options).parse(text)


PARSER_METADATA = FormatMetadata(
    format_name="toml",
    extensions=(".toml",),
    parser_class=TomlParser,
    parser_options_class=TomlParserOptions,
    required_packages=(),
    description="TOML documents; integers and floats share the Number variant",
)
