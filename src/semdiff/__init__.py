#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/__init__.py
"""semdiff - Semantic, structure-aware diffing of configuration and data files.

semdiff compares JSON, YAML, TOML, INI, XML and CSV documents by their
structure rather than their text. Both inputs are parsed into a common
canonical value tree, so key order, quoting, indentation and comments never
show up as differences, and the two sides may even be in different formats.

Key Features
------------
- One canonical value model shared by all formats
- Typed, path-addressed diff entries (Added, Removed, Modified, TypeChanged)
- Numeric tolerance, whitespace and case normalization
- Regex key exclusion and path filtering
- Identity-based array matching (``array_id_key``)
- Native, JSON and YAML output

Supported Formats
-----------------
- **Structured**: JSON, YAML, TOML, XML
- **Tabular / flat**: CSV, INI

Requirements
------------
- Python 3.10+
- PyYAML for YAML input and output, defusedxml for XML input

Examples
--------
Compare two documents in different formats:

    >>> from semdiff import parse, diff, format_output
    >>> old = parse('{"server": {"port": 8080}}', "json")
    >>> new = parse("server:\\n  port: 8081\\n", "yaml")
    >>> print(format_output(diff(old, new)))
    ~ server.port: 8080 -> 8081

Ignore volatile keys and small numeric noise:

    >>> diff({"v": 1.0, "_ts": 1}, {"v": 1.0000001, "_ts": 2}, {"epsilon": 1e-5, "ignore_keys_regex": "^_"})
    []

"""

from semdiff.diff import (
    Added,
    ChangeKind,
    DiffEngine,
    DiffEntry,
    DiffReport,
    Modified,
    Removed,
    TypeChanged,
    compare,
    diff,
    diff_many,
    entry_from_dict,
    entry_to_dict,
    format_output,
    has_differences,
)
from semdiff.exceptions import (
    ConfigError,
    DependencyError,
    DepthExceededError,
    EngineError,
    FormatError,
    InvalidPatternError,
    ParsingError,
    SemdiffError,
    UnknownFormatError,
    ValidationError,
)
from semdiff.model import (
    Array,
    Bool,
    Null,
    Number,
    Object,
    String,
    Value,
    ValueKind,
    from_python,
    to_python,
)
from semdiff.options import (
    CsvParserOptions,
    DiffOptions,
    IniParserOptions,
    JsonParserOptions,
    OutputFormat,
    TomlParserOptions,
    XmlParserOptions,
    YamlParserOptions,
    validate_options,
)
from semdiff.parsers import (
    detect_format,
    list_formats,
    parse,
    parse_csv,
    parse_ini,
    parse_json,
    parse_toml,
    parse_xml,
    parse_yaml,
)

__version__ = "0.1.0"

__all__ = [
    "Added",
    "Array",
    "Bool",
    "ChangeKind",
    "ConfigError",
    "CsvParserOptions",
    "DependencyError",
    "DepthExceededError",
    "DiffEngine",
    "DiffEntry",
    "DiffOptions",
    "DiffReport",
    "EngineError",
    "FormatError",
    "IniParserOptions",
    "InvalidPatternError",
    "JsonParserOptions",
    "Modified",
    "Null",
    "Number",
    "Object",
    "OutputFormat",
    "ParsingError",
    "Removed",
    "SemdiffError",
    "String",
    "TomlParserOptions",
    "TypeChanged",
    "UnknownFormatError",
    "ValidationError",
    "Value",
    "ValueKind",
    "XmlParserOptions",
    "YamlParserOptions",
    "__version__",
    "compare",
    "detect_format",
    "diff",
    "diff_many",
    "entry_from_dict",
    "entry_to_dict",
    "format_output",
    "from_python",
    "has_differences",
    "list_formats",
    "parse",
    "parse_csv",
    "parse_ini",
    "parse_json",
    "parse_toml",
    "parse_xml",
    "parse_yaml",
    "to_python",
    "validate_options",
]
