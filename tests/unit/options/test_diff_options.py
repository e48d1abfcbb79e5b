#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/options/test_diff_options.py
"""Unit tests for DiffOptions and validate_options.

Tests cover:
- Defaults
- Pattern compilation and InvalidPatternError
- Output format resolution and aliases
- Type and range validation
- camelCase keys from host bindings
- create_updated cloning

"""

import math
import re

import pytest

from semdiff.exceptions import ConfigError, InvalidPatternError, UnknownFormatError, ValidationError
from semdiff.options import DiffOptions, OutputFormat, max_depth_ceiling, validate_options


@pytest.mark.unit
class TestDiffOptionsDefaults:
    """Tests for default option values."""

    def test_defaults(self):
        """Test every field has its documented default."""
        options = DiffOptions()
        assert options.epsilon is None
        assert options.array_id_key is None
        assert options.ignore_keys_regex is None
        assert options.path_filter is None
        assert options.output_format is OutputFormat.NATIVE
        assert options.ignore_whitespace is False
        assert options.ignore_case is False
        assert options.brief_mode is False
        assert options.quiet_mode is False
        assert options.max_depth == 256

    def test_validate_none_returns_defaults(self):
        """Test None validates to defaults."""
        assert validate_options(None) == DiffOptions()

    def test_validate_returns_existing_options(self):
        """Test a DiffOptions instance is returned unchanged."""
        options = DiffOptions(epsilon=0.1)
        assert validate_options(options) is options

    def test_field_metadata(self):
        """Test fields carry help text for documentation and CLIs."""
        from dataclasses import fields

        for f in fields(DiffOptions):
            assert f.metadata.get("help"), f.name
            assert f.metadata.get("importance") in {"core", "advanced", "security"}


@pytest.mark.unit
class TestKeyPattern:
    """Tests for ignore_keys_regex handling."""

    def test_string_is_compiled(self):
        """Test pattern strings are compiled once."""
        options = DiffOptions(ignore_keys_regex="^_")
        assert isinstance(options.ignore_keys_regex, re.Pattern)
        assert options.ignore_keys_regex.search("_ts")

    def test_compiled_pattern_is_kept(self):
        """Test precompiled patterns are used as-is."""
        pattern = re.compile("ts$")
        assert DiffOptions(ignore_keys_regex=pattern).ignore_keys_regex is pattern

    def test_invalid_pattern(self):
        """Test a malformed regex raises InvalidPatternError."""
        with pytest.raises(InvalidPatternError) as exc_info:
            validate_options({"ignore_keys_regex": "(unclosed"})
        error = exc_info.value
        assert error.pattern == "(unclosed"
        assert error.parameter_name == "ignore_keys_regex"
        assert isinstance(error.original_error, re.error)

    def test_invalid_pattern_is_config_error(self):
        """Test pattern errors are catchable as ConfigError and ValidationError."""
        with pytest.raises(ConfigError):
            DiffOptions(ignore_keys_regex="[")
        with pytest.raises(ValidationError):
            DiffOptions(ignore_keys_regex="[")

    def test_non_string_pattern(self):
        """Test a non-string pattern is rejected."""
        with pytest.raises(InvalidPatternError):
            DiffOptions(ignore_keys_regex=42)


@pytest.mark.unit
class TestOutputFormat:
    """Tests for output format resolution."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("native", OutputFormat.NATIVE),
            ("JSON", OutputFormat.JSON),
            (" yaml ", OutputFormat.YAML),
            ("yml", OutputFormat.YAML),
            ("diffx", OutputFormat.NATIVE),
            ("text", OutputFormat.NATIVE),
            (OutputFormat.JSON, OutputFormat.JSON),
        ],
    )
    def test_resolves_names(self, name, expected):
        """Test names, case and aliases resolve to the enum."""
        assert DiffOptions(output_format=name).output_format is expected

    def test_unknown_format(self):
        """Test unknown names raise UnknownFormatError."""
        with pytest.raises(UnknownFormatError) as exc_info:
            validate_options({"output_format": "xml"})
        assert exc_info.value.format_name == "xml"
        assert "native" in str(exc_info.value)

    def test_names(self):
        """Test canonical names."""
        assert OutputFormat.names() == ["native", "json", "yaml"]


@pytest.mark.unit
class TestValueValidation:
    """Tests for type and range checks."""

    @pytest.mark.parametrize("epsilon", [-0.1, math.nan, "0.1", True])
    def test_bad_epsilon(self, epsilon):
        """Test negative, NaN and non-numeric tolerances are rejected."""
        with pytest.raises(ConfigError) as exc_info:
            DiffOptions(epsilon=epsilon)
        assert exc_info.value.parameter_name == "epsilon"

    def test_zero_and_integer_epsilon(self):
        """Test zero and integer tolerances are valid."""
        assert DiffOptions(epsilon=0).epsilon == 0
        assert DiffOptions(epsilon=1).epsilon == 1

    @pytest.mark.parametrize("name", ["ignore_whitespace", "ignore_case", "brief_mode", "quiet_mode"])
    def test_flags_must_be_bool(self, name):
        """Test boolean flags reject other types."""
        with pytest.raises(ConfigError) as exc_info:
            DiffOptions(**{name: "yes"})
        assert exc_info.value.parameter_name == name

    @pytest.mark.parametrize("name", ["array_id_key", "path_filter"])
    def test_strings_must_be_str(self, name):
        """Test string options reject other types."""
        with pytest.raises(ConfigError):
            DiffOptions(**{name: 1})

    @pytest.mark.parametrize("max_depth", [0, -1, 1.5, True])
    def test_bad_max_depth(self, max_depth):
        """Test max_depth must be a positive integer."""
        with pytest.raises(ConfigError):
            DiffOptions(max_depth=max_depth)

    def test_max_depth_ceiling(self):
        """Test max_depth is bounded by what the recursion limit can walk."""
        ceiling = max_depth_ceiling()
        assert ceiling >= DiffOptions().max_depth
        assert DiffOptions(max_depth=ceiling).max_depth == ceiling
        with pytest.raises(ConfigError) as exc_info:
            DiffOptions(max_depth=ceiling + 1)
        assert exc_info.value.parameter_name == "max_depth"

    def test_max_depth_beyond_recursion_limit(self):
        """Test a bound deeper than the interpreter stack is rejected up front."""
        with pytest.raises(ConfigError):
            validate_options({"maxDepth": 5000})

    def test_properties(self):
        """Test derived properties."""
        assert not DiffOptions().normalizes_strings
        assert DiffOptions(ignore_case=True).normalizes_strings
        assert DiffOptions(quiet_mode=True).stops_early
        assert DiffOptions(brief_mode=True).stops_early
        assert not DiffOptions().stops_early


@pytest.mark.unit
class TestValidateOptionsMapping:
    """Tests for validate_options with raw mappings."""

    def test_snake_case_keys(self):
        """Test snake_case keys."""
        options = validate_options({"epsilon": 0.01, "array_id_key": "id", "path_filter": "users"})
        assert options.epsilon == 0.01
        assert options.array_id_key == "id"
        assert options.path_filter == "users"

    def test_camel_case_keys(self):
        """Test camelCase keys used by host bindings."""
        options = validate_options(
            {
                "arrayIdKey": "id",
                "ignoreKeysRegex": "^_",
                "pathFilter": "a",
                "outputFormat": "json",
                "ignoreWhitespace": True,
                "ignoreCase": True,
                "briefMode": True,
                "quietMode": False,
                "maxDepth": 10,
            }
        )
        assert options.array_id_key == "id"
        assert options.ignore_keys_regex.pattern == "^_"
        assert options.output_format is OutputFormat.JSON
        assert options.ignore_whitespace and options.ignore_case and options.brief_mode
        assert options.max_depth == 10

    def test_none_values_use_defaults(self):
        """Test None values mean "not set"."""
        assert validate_options({"epsilon": None, "output_format": None}) == DiffOptions()

    def test_unknown_key(self):
        """Test unknown option names are rejected."""
        with pytest.raises(ConfigError) as exc_info:
            validate_options({"epsilonn": 0.1})
        assert exc_info.value.parameter_name == "epsilonn"

    def test_duplicate_spellings(self):
        """Test the same option given in both spellings is rejected."""
        with pytest.raises(ConfigError):
            validate_options({"array_id_key": "id", "arrayIdKey": "id"})

    def test_non_mapping(self):
        """Test non-mapping input is rejected."""
        with pytest.raises(ConfigError):
            validate_options(["epsilon", 0.1])


@pytest.mark.unit
class TestCreateUpdated:
    """Tests for cloning frozen options."""

    def test_clone_with_changes(self):
        """Test create_updated returns a new, revalidated instance."""
        original = DiffOptions(epsilon=0.1)
        updated = original.create_updated(ignore_keys_regex="^_")
        assert original.ignore_keys_regex is None
        assert updated.epsilon == 0.1
        assert updated.ignore_keys_regex.pattern == "^_"

    def test_clone_revalidates(self):
        """Test invalid updates are rejected."""
        with pytest.raises(ConfigError):
            DiffOptions().create_updated(epsilon=-1)

    def test_options_are_frozen(self):
        """Test options cannot be mutated."""
        from dataclasses import FrozenInstanceError

        with pytest.raises(FrozenInstanceError):
            DiffOptions().epsilon = 0.5
