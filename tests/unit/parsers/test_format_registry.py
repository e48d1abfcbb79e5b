#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_format_registry.py
"""Unit tests for the format registry and the parsers package entry points."""

import pytest

from semdiff.exceptions import FormatError, InvalidOptionsError
from semdiff.format_registry import FormatMetadata, FormatRegistry
from semdiff.model import Number, Object
from semdiff.options.csv import CsvParserOptions
from semdiff.options.ini import IniParserOptions
from semdiff.parsers import FORMAT_REGISTRY, detect_format, get_parser, list_formats, parse
from semdiff.parsers.ini import IniParser
from semdiff.parsers.json import JsonParser


@pytest.mark.unit
class TestFormatRegistry:
    """Tests for FormatRegistry lookups."""

    def test_all_formats_registered(self):
        """Test the six input formats are registered in a stable order."""
        assert list_formats() == ["json", "yaml", "toml", "ini", "xml", "csv"]

    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("config.json", "json"),
            ("deploy.YML", "yaml"),
            ("pyproject.toml", "toml"),
            ("setup.cfg", "ini"),
            ("feed.xml", "xml"),
            ("data.tsv", "csv"),
            ("/tmp/dir.d/table.csv", "csv"),
            ("README", None),
            ("notes.txt", None),
        ],
    )
    def test_detect_format(self, filename, expected):
        """Test detection from file extensions."""
        assert detect_format(filename) == expected

    def test_get_is_case_insensitive(self):
        """Test format lookup ignores case and surrounding spaces."""
        assert FORMAT_REGISTRY.get(" JSON ").parser_class is JsonParser

    def test_unknown_format(self):
        """Test unknown names raise FormatError listing the known formats."""
        with pytest.raises(FormatError) as exc_info:
            FORMAT_REGISTRY.get("hcl")
        assert exc_info.value.format_type == "hcl"
        assert "json" in exc_info.value.supported_formats

    def test_duplicate_registration_rejected(self):
        """Test a registry cannot hold two formats with the same name."""
        metadata = FormatMetadata("json", (".json",), JsonParser, object)
        with pytest.raises(ValueError):
            FormatRegistry([metadata, metadata])

    def test_indexes_are_read_only(self):
        """Test the registry cannot be modified after construction."""
        with pytest.raises(TypeError):
            FORMAT_REGISTRY._by_name["new"] = None  # type: ignore[index]

    def test_metadata_declares_dependencies(self):
        """Test formats backed by third-party packages declare them."""
        assert FORMAT_REGISTRY.get("yaml").required_packages
        assert FORMAT_REGISTRY.get("xml").required_packages
        assert FORMAT_REGISTRY.get("json").required_packages == ()


@pytest.mark.unit
class TestParseEntryPoint:
    """Tests for parse and get_parser."""

    def test_parse_by_name(self):
        """Test dispatch to the registered parser."""
        assert parse('{"a": 1}', "json") == Object({"a": Number(1)})

    def test_get_parser_with_options(self):
        """Test parser construction with format options."""
        parser = get_parser("ini", IniParserOptions(infer_types=True))
        assert isinstance(parser, IniParser)
        assert parser.parse("[s]\nn = 1\n") == Object({"s": Object({"n": Number(1)})})

    def test_mismatched_options(self):
        """Test options of another format are rejected."""
        with pytest.raises(InvalidOptionsError):
            parse("a\n1\n", "ini", CsvParserOptions())

    def test_unknown_format(self):
        """Test unknown formats raise FormatError."""
        with pytest.raises(FormatError):
            parse("x", "hcl")
