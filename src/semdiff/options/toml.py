#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/options/toml.py
"""Options for TOML parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from semdiff.options.base import BaseParserOptions


@dataclass(frozen=True)
class TomlParserOptions(BaseParserOptions):
    """Configuration options for TOML parsing.

    Parameters
    ----------
    float_as_decimal_string : bool, default = False
        If True, floats are kept as their exact decimal text (String) instead
        of a binary Number. Useful when comparing values such as money
        amounts where float rounding matters.

    """

    float_as_decimal_string: bool = field(
        default=False,
        metadata={"help": "Keep floats as exact decimal strings", "importance": "advanced"},
    )
