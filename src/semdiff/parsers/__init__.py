#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/parsers/__init__.py
"""Format parsers package.

Each parser module defines a parser class, a ``parse_<format>`` function and
a ``PARSER_METADATA`` object describing the format. The metadata objects are
collected here into :data:`FORMAT_REGISTRY`, which is built once at import
time and never modified afterwards.

Examples
--------
    >>> from semdiff.parsers import parse
    >>> parse('{"a": 1}', "json")
    Object(fields={'a': Number(value=1)})

"""

from __future__ import annotations

import logging
from typing import Optional, Union

from semdiff.format_registry import FormatRegistry
from semdiff.model import Value
from semdiff.options.base import BaseParserOptions
from semdiff.parsers import csv as _csv
from semdiff.parsers import ini as _ini
from semdiff.parsers import json as _json
from semdiff.parsers import toml as _toml
from semdiff.parsers import xml as _xml
from semdiff.parsers import yaml as _yaml
from semdiff.parsers.base import BaseParser
from semdiff.parsers.csv import CsvParser, parse_csv
from semdiff.parsers.ini import IniParser, parse_ini
from semdiff.parsers.json import JsonParser, parse_json
from semdiff.parsers.toml import TomlParser, parse_toml
from semdiff.parsers.xml import XmlParser, parse_xml
from semdiff.parsers.yaml import YamlParser, parse_yaml

logger = logging.getLogger(__name__)

FORMAT_REGISTRY = FormatRegistry(
    [
        _json.PARSER_METADATA,
        _yaml.PARSER_METADATA,
        _toml.PARSER_METADATA,
        _ini.PARSER_METADATA,
        _xml.PARSER_METADATA,
        _csv.PARSER_METADATA,
    ]
)


def get_parser(format_name: str, options: Optional[BaseParserOptions] = None) -> BaseParser:
    """Create the parser registered for ``format_name``.

    Parameters
    ----------
    format_name : str
        Registered format name (case-insensitive)
    options : BaseParserOptions or None, default = None
        Options for the parser; must match the format's options class

    Raises
    ------
    FormatError
        If the format is not registered
    InvalidOptionsError
        If ``options`` has the wrong type for the format

    """
    metadata = FORMAT_REGISTRY.get(format_name)
    return metadata.parser_class(options)


def parse(
    text: Union[str, bytes],
    format_name: str,
    options: Optional[BaseParserOptions] = None,
) -> Value:
    """Parse ``text`` with the parser registered for ``format_name``.

    Raises
    ------
    FormatError
        If the format is not registered
    ParsingError
        If the text is not valid for the format

    """
    parser = get_parser(format_name, options)
    logger.debug(f"Parsing input as {parser.format_name}")
    return parser.parse(text)


def detect_format(filename: str) -> Optional[str]:
    """Return the format name implied by ``filename``'s extension, or None."""
    return FORMAT_REGISTRY.detect_format(filename)


def list_formats() -> list[str]:
    """Return the names of all registered formats."""
    return FORMAT_REGISTRY.list_formats()


__all__ = [
    "FORMAT_REGISTRY",
    "BaseParser",
    "CsvParser",
    "IniParser",
    "JsonParser",
    "TomlParser",
    "XmlParser",
    "YamlParser",
    "detect_format",
    "get_parser",
    "list_formats",
    "parse",
    "parse_csv",
    "parse_ini",
    "parse_json",
    "parse_toml",
    "parse_xml",
    "parse_yaml",
]
