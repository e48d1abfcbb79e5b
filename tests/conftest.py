"""Pytest configuration and shared fixtures for the semdiff test suite.

This module provides shared fixtures, test configuration, and sample
documents that are used across the entire test suite.
"""

import logging
from typing import Generator

import pytest

from semdiff.model import Value, from_python

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def semdiff_logger() -> Generator[logging.Logger, None, None]:
    """Provide the library logger and restore its configuration afterwards.

    Yields
    ------
    logging.Logger
        The ``semdiff`` logger

    """
    logger = logging.getLogger("semdiff")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    saved_propagate = logger.propagate
    try:
        yield logger
    finally:
        for handler in list(logger.handlers):
            if handler not in saved_handlers:
                handler.close()
        logger.handlers = saved_handlers
        logger.setLevel(saved_level)
        logger.propagate = saved_propagate


@pytest.fixture
def user_record() -> Value:
    """Provide a small nested record used by engine and renderer tests.

    Returns
    -------
    Value
        Canonical Object with scalars, a nested object and an array

    """
    return from_python(
        {
            "name": "Alice",
            "age": 30,
            "active": True,
            "address": {"city": "Paris", "zip": "75001"},
            "tags": ["admin", "dev"],
            "manager": None,
        }
    )


@pytest.fixture
def sample_json() -> str:
    """Provide a JSON document equivalent to the other ``sample_*`` fixtures."""
    return '{"server": {"host": "localhost", "port": 8080}, "debug": false, "tags": ["a", "b"]}'


@pytest.fixture
def sample_yaml() -> str:
    """Provide a YAML document equivalent to the other ``sample_*`` fixtures."""
    return """
# Server configuration
debug: false
server:
  port: 8080
  host: localhost
tags:
  - a
  - b
"""


@pytest.fixture
def sample_toml() -> str:
    """Provide a TOML document equivalent to the other ``sample_*`` fixtures."""
    return """
debug = false
tags = ["a", "b"]

[server]
host = "localhost"
port = 8080
"""
