#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/options/json.py
"""Options for JSON parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from semdiff.options.base import BaseParserOptions


@dataclass(frozen=True)
class JsonParserOptions(BaseParserOptions):
    """Configuration options for JSON parsing.

    Parameters
    ----------
    allow_nan : bool, default = False
        Accept the non-standard ``NaN``, ``Infinity`` and ``-Infinity`` literals.
    reject_duplicate_keys : bool, default = False
        Raise a parse error when an object repeats a key. When False the last
        occurrence wins, as with most JSON readers.

    """

    allow_nan: bool = field(
        default=False,
        metadata={"help": "Accept NaN/Infinity literals", "importance": "advanced"},
    )
    reject_duplicate_keys: bool = field(
        default=False,
        metadata={"help": "Fail on repeated object keys instead of keeping the last one", "importance": "advanced"},
    )
