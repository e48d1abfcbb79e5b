#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/parsers/json.py
"""JSON to canonical value parser.

JSON maps directly onto the canonical model: objects, arrays, strings,
numbers, booleans and null each have a matching variant.

Examples
--------
    >>> parse_json('{"name": "Alice", "age": 30}')
    Object(fields={'name': String(value='Alice'), 'age': Number(value=30)})

"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Union

from semdiff.format_registry import FormatMetadata
from semdiff.model import Value
from semdiff.options.json import JsonParserOptions
from semdiff.parsers.base import BaseParser

logger = logging.getLogger(__name__)


class _DuplicateKeyError(ValueError):
    def __init__(self, key: str):
        super().__init__(f"duplicate object key {key!r}")
        self.key = key


class JsonParser(BaseParser):
    """Parse JSON text into a canonical value.

    Parameters
    ----------
    options : JsonParserOptions or None, default = None
        Parser configuration options

    """

    format_name = "json"

    def __init__(self, options: JsonParserOptions | None = None):
        """Initialize the JSON parser with options."""
        BaseParser._validate_options_type(options, JsonParserOptions, "json")
        options = options or JsonParserOptions()
        super().__init__(options)
        self.options: JsonParserOptions = options

    def parse(self, text: Union[str, bytes]) -> Value:
        """Parse JSON text.

        Raises
        ------
        ParsingError
            If the text is not valid JSON; line and column are reported

        """
        content = self._ensure_text(text)

        try:
            data = json.loads(
                content,
                object_pairs_hook=self._build_object,
                parse_constant=self._parse_constant,
            )
        except json.JSONDecodeError as e:
            raise self._error(e.msg, original_error=e, line=e.lineno, column=e.colno) from e
        except _DuplicateKeyError as e:
            raise self._error(str(e), original_error=e, parsing_stage="validation") from e
        except ValueError as e:
            raise self._error(str(e), original_error=e) from e
        except RecursionError as e:
            raise self._error("document is nested too deeply", original_error=e, parsing_stage="nesting") from e

        return self._to_value(data)

    def _build_object(self, pairs: list[tuple[str, Any]]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, item in pairs:
            if key in result:
                if self.options.reject_duplicate_keys:
                    raise _DuplicateKeyError(key)
                logger.debug(f"Duplicate JSON key {key!r}; keeping the last value")
            result[key] = item
        return result

    def _parse_constant(self, name: str) -> float:
        if not self.options.allow_nan:
            raise ValueError(f"non-standard literal {name!r} is not allowed")
        return float(name)


def parse_json(text: Union[str, bytes], options: Optional[JsonParserOptions] = None) -> Value:
    """Parse JSON text into a canonical value.

    Raises
    ------
    ParsingError
        If the text is not valid JSON

    """
    return JsonParser(options).parse(text)


PARSER_METADATA = FormatMetadata(
    format_name="json",
    extensions=(".json", ".geojson"),
    parser_class=JsonParser,
    parser_options_class=JsonParserOptions,
    required_packages=(),
    description="JSON documents; direct variant mapping",
)

__all__ = ["JsonParser", "PARSER_METADATA", "parse_json"]
