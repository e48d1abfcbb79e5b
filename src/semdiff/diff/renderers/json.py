#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/diff/renderers/json.py
"""JSON diff renderer for structured output.

Entries are written as an array of tagged objects in their external
dictionary shape, suitable for programmatic processing and for reading back
with :func:`~semdiff.diff.entries.entry_from_dict`.

NaN and infinite numbers are written as the strings ``"NaN"``, ``"Infinity"``
and ``"-Infinity"`` so the output is always strict JSON.
"""

from __future__ import annotations

import json
from typing import Iterable

from semdiff.constants import DEFAULT_JSON_INDENT
from semdiff.diff.renderers.base import BaseDiffRenderer, EntryLike


class JsonDiffRenderer(BaseDiffRenderer):
    """Render entries as a JSON array.

    Parameters
    ----------
    pretty_print : bool, default = True
        If True, format JSON with indentation
    indent : int, default = 2
        Number of spaces for indentation (if pretty_print=True)

    Examples
    --------
        >>> from semdiff.diff import diff
        >>> print(JsonDiffRenderer(pretty_print=False).render(diff({"b": 2}, {"b": 3})))
        [{"type": "Modified", "path": "b", "oldValue": 2, "newValue": 3}]

    """

    format_name = "json"

    def __init__(self, pretty_print: bool = True, indent: int = DEFAULT_JSON_INDENT):
        """Initialize the JSON diff renderer."""
        self.pretty_print = pretty_print
        self.indent = indent

    def render(self, entries: Iterable[EntryLike]) -> str:
        """Render ``entries``; an empty list renders as ``[]``."""
        data = self._as_dicts(entries, json_compatible=True)
        if self.pretty_print:
            return json.dumps(data, indent=self.indent, ensure_ascii=False, allow_nan=False)
        return json.dumps(data, ensure_ascii=False, allow_nan=False)
