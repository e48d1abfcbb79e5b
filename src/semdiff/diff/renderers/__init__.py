#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/diff/renderers/__init__.py
"""Diff renderers for various output formats.

Available Renderers
-------------------
- NativeDiffRenderer: One marker-prefixed line per entry, for terminals
- JsonDiffRenderer: Array of tagged objects for programmatic access
- YamlDiffRenderer: Same shape as JSON, as block-style YAML

Examples
--------
Render diff as JSON:
    >>> from semdiff.diff import diff
    >>> from semdiff.diff.renderers import JsonDiffRenderer
    >>> entries = diff({"a": 1}, {"a": 2})
    >>> output = JsonDiffRenderer().render(entries)

"""

from semdiff.diff.renderers.base import BaseDiffRenderer
from semdiff.diff.renderers.json import JsonDiffRenderer
from semdiff.diff.renderers.native import NativeDiffRenderer
from semdiff.diff.renderers.yaml import YamlDiffRenderer

__all__ = [
    "BaseDiffRenderer",
    "JsonDiffRenderer",
    "NativeDiffRenderer",
    "YamlDiffRenderer",
]
