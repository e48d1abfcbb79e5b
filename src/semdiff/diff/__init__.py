#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/diff/__init__.py
"""Structural comparison and diff rendering.

Key Features
------------
- Type-aware comparison of canonical value trees
- Deterministic entry order (old keys first, then new-only keys)
- Identity-based array matching via ``array_id_key``
- Numeric tolerance, whitespace and case normalization, key exclusion
- Brief and quiet modes that stop at the first difference
- Native, JSON and YAML output

Examples
--------
Compare two documents:
    >>> from semdiff.diff import diff, format_output
    >>> entries = diff({"a": 1, "b": 2}, {"a": 1, "b": 3})
    >>> print(format_output(entries, "json"))
    [
      {
        "type": "Modified",
        "path": "b",
        "oldValue": 2,
        "newValue": 3
      }
    ]

"""

from semdiff.diff.api import format_output, get_renderer
from semdiff.diff.engine import DiffEngine, compare, diff, diff_many, has_differences
from semdiff.diff.entries import (
    Added,
    ChangeKind,
    DiffEntry,
    DiffReport,
    Modified,
    Removed,
    TypeChanged,
    entry_from_dict,
    entry_to_dict,
)

__all__ = [
    "Added",
    "ChangeKind",
    "DiffEngine",
    "DiffEntry",
    "DiffReport",
    "Modified",
    "Removed",
    "TypeChanged",
    "compare",
    "diff",
    "diff_many",
    "entry_from_dict",
    "entry_to_dict",
    "format_output",
    "get_renderer",
    "has_differences",
]
