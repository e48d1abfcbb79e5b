#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/diff/renderers/base.py
"""Shared base for diff entry renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Iterable, Mapping, Union

from semdiff.diff.entries import DiffEntry, entry_from_dict, entry_to_dict

EntryLike = Union[DiffEntry, Mapping[str, Any]]


class BaseDiffRenderer(ABC):
    """Render a list of diff entries to text.

    Entries may be :class:`~semdiff.diff.entries.DiffEntry` objects or their
    external dictionary shape; dictionaries are validated on the way in.
    """

    format_name: ClassVar[str] = ""

    @abstractmethod
    def render(self, entries: Iterable[EntryLike]) -> str:
        """Render ``entries`` in order.

        Raises
        ------
        ValidationError
            If a dictionary entry does not have the external entry shape

        """

    @staticmethod
    def _as_entries(entries: Iterable[EntryLike]) -> list[DiffEntry]:
        return [entry if isinstance(entry, DiffEntry) else entry_from_dict(entry) for entry in entries]

    @classmethod
    def _as_dicts(cls, entries: Iterable[EntryLike], json_compatible: bool = False) -> list[dict[str, Any]]:
        return [entry_to_dict(entry, json_compatible) for entry in cls._as_entries(entries)]
