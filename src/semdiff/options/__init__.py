#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for semdiff parsers and the diff engine.

Each format parser has its own frozen options dataclass; :class:`DiffOptions`
configures the diff engine and output shaping.
"""

from __future__ import annotations

from semdiff.options.base import BaseParserOptions, CloneFrozenMixin
from semdiff.options.csv import CsvParserOptions
from semdiff.options.diff import DiffOptions, OutputFormat, compile_key_pattern, max_depth_ceiling, validate_options
from semdiff.options.ini import IniParserOptions
from semdiff.options.json import JsonParserOptions
from semdiff.options.toml import TomlParserOptions
from semdiff.options.xml import XmlParserOptions
from semdiff.options.yaml import YamlParserOptions

__all__ = [
    "BaseParserOptions",
    "CloneFrozenMixin",
    "CsvParserOptions",
    "DiffOptions",
    "IniParserOptions",
    "JsonParserOptions",
    "OutputFormat",
    "TomlParserOptions",
    "XmlParserOptions",
    "YamlParserOptions",
    "compile_key_pattern",
    "max_depth_ceiling",
    "validate_options",
]
