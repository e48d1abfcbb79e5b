#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/utils/inference.py
"""Scalar type inference for text-only formats (INI, CSV).

The rules are deliberately narrow so that both sides of a comparison infer
the same type for the same text:

- Integers: optional sign followed by digits (``"007"`` is 7)
- Floats: decimal or exponent notation (``"1.5"``, ``".5"``, ``"1e3"``);
  ``nan``/``inf`` spellings stay strings
- Booleans (``infer_scalar`` only): ``true``/``false`` in any case
"""

from __future__ import annotations

import re
from typing import Union

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")


def infer_number(text: str) -> Union[int, float, None]:
    """Return ``text`` as an int or float, or None if it is not numeric."""
    candidate = text.strip()
    if _INT_PATTERN.fullmatch(candidate):
        try:
            return int(candidate)
        except ValueError:
            # Beyond the interpreter's integer string conversion limit
            return None
    if _FLOAT_PATTERN.fullmatch(candidate):
        return float(candidate)
    return None


def infer_scalar(text: str) -> Union[bool, int, float, str]:
    """Return ``text`` converted to bool, int or float when it looks like one."""
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    number = infer_number(text)
    return text if number is None else number
