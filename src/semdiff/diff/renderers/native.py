#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/diff/renderers/native.py
"""Line-oriented, human-readable diff output.

One line per entry, prefixed by a change marker:

.. code-block:: text

    + path: value
    - path: value
    ~ path: old -> new
    ! path: old -> new (OldKind -> NewKind)

Values are single-line JSON literals and the root path is shown as
``(root)``.
"""

from __future__ import annotations

from typing import Iterable

from semdiff.diff.entries import Added, DiffEntry, Modified, Removed, TypeChanged
from semdiff.diff.paths import display_path
from semdiff.diff.renderers.base import BaseDiffRenderer, EntryLike
from semdiff.model import value_to_json


class NativeDiffRenderer(BaseDiffRenderer):
    """Render entries as marker-prefixed lines.

    Examples
    --------
        >>> from semdiff.diff import diff
        >>> print(NativeDiffRenderer().render(diff({"a": 1, "b": 2}, {"a": "1", "c": 3})))
        ! a: 1 -> "1" (Number -> String)
        - b: 2
        + c: 3

    """

    format_name = "native"

    def render(self, entries: Iterable[EntryLike]) -> str:
        """Render ``entries``; an empty list renders as the empty string."""
        return "\n".join(self.render_entry(entry) for entry in self._as_entries(entries))

    def render_entry(self, entry: DiffEntry) -> str:
        """Render a single entry as one line."""
        path = display_path(entry.path)
        if isinstance(entry, Added):
            return f"+ {path}: {value_to_json(entry.value)}"
        if isinstance(entry, Removed):
            return f"- {path}: {value_to_json(entry.value)}"
        if isinstance(entry, TypeChanged):
            return (
                f"! {path}: {value_to_json(entry.old_value)} -> {value_to_json(entry.new_value)} "
                f"({entry.old_value.kind.value} -> {entry.new_value.kind.value})"
            )
        if isinstance(entry, Modified):
            return f"~ {path}: {value_to_json(entry.old_value)} -> {value_to_json(entry.new_value)}"
        raise TypeError(f"Unsupported diff entry type: {type(entry).__name__}")
