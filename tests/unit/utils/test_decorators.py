#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_decorators.py
"""Unit tests for utils/decorators.py."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

import semdiff.utils.decorators
from semdiff.exceptions import DependencyError
from semdiff.utils.decorators import debug_timer, requires_dependencies


@pytest.mark.unit
class TestRequiresDependencies:
    """Test the requires_dependencies decorator."""

    def test_missing_package_raises_error(self) -> None:
        """Test that a missing package raises DependencyError."""

        @requires_dependencies("test", [("nonexistent-package", "nonexistent_semdiff_module", "")])
        def sample_function() -> str:
            return "success"

        with pytest.raises(DependencyError) as exc_info:
            sample_function()

        assert exc_info.value.converter_name == "test"
        assert ("nonexistent-package", "") in exc_info.value.missing_packages
        assert exc_info.value.original_import_error is not None
        assert "pip install" in str(exc_info.value)

    def test_version_mismatch_raises_error(self) -> None:
        """Test that an installed package with the wrong version raises DependencyError."""
        with patch("semdiff.utils.decorators.importlib.import_module"):
            with patch.object(semdiff.utils.decorators, "check_version_requirement", return_value=(False, "5.1")):

                @requires_dependencies("yaml", [("pyyaml", "yaml", ">=6.0")])
                def sample_function() -> str:
                    return "success"

                with pytest.raises(DependencyError) as exc_info:
                    sample_function()

                assert exc_info.value.missing_packages == []
                assert ("pyyaml", ">=6.0", "5.1") in exc_info.value.version_mismatches

    def test_correct_version_succeeds(self) -> None:
        """Test that a satisfied requirement runs the wrapped function."""
        with patch("semdiff.utils.decorators.importlib.import_module"):
            with patch.object(semdiff.utils.decorators, "check_version_requirement", return_value=(True, "6.0.2")):

                @requires_dependencies("yaml", [("pyyaml", "yaml", ">=6.0")])
                def sample_function(value: int) -> int:
                    return value * 2

                assert sample_function(21) == 42

    def test_no_version_spec_skips_version_check(self) -> None:
        """Test that an empty version spec accepts any installed version."""
        with patch("semdiff.utils.decorators.importlib.import_module"):
            with patch.object(semdiff.utils.decorators, "check_version_requirement") as check:

                @requires_dependencies("xml", [("defusedxml", "defusedxml", "")])
                def sample_function() -> str:
                    return "success"

                assert sample_function() == "success"
                check.assert_not_called()

    def test_preserves_metadata(self) -> None:
        """Test the wrapper keeps the wrapped function's name and docstring."""

        @requires_dependencies("test", [])
        def documented() -> None:
            """Do nothing."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Do nothing."


@pytest.mark.unit
class TestDebugTimer:
    """Test the debug_timer context manager."""

    def test_logs_elapsed_time_at_debug(self, caplog) -> None:
        """Test a completion message is logged when DEBUG is enabled."""
        logger = logging.getLogger("semdiff.tests.timer")
        with caplog.at_level(logging.DEBUG, logger="semdiff.tests.timer"):
            with debug_timer(logger, "Sample operation"):
                pass

        assert any("Sample operation completed in" in record.message for record in caplog.records)

    def test_silent_above_debug(self, caplog) -> None:
        """Test nothing is logged when DEBUG is disabled."""
        logger = logging.getLogger("semdiff.tests.timer_quiet")
        with caplog.at_level(logging.INFO, logger="semdiff.tests.timer_quiet"):
            with debug_timer(logger, "Sample operation"):
                pass

        assert not caplog.records

    def test_exceptions_propagate(self) -> None:
        """Test errors raised in the block are not swallowed."""
        logger = logging.getLogger("semdiff.tests.timer_error")
        with pytest.raises(RuntimeError):
            with debug_timer(logger, "Failing operation"):
                raise RuntimeError("boom")
