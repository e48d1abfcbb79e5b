#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/diff/entries.py
"""Diff entries and the result of a comparison.

A comparison produces an ordered list of entries, one per difference. Each
entry names the path it applies to and carries the canonical value(s)
involved.

External shape
--------------
Entries cross process and language boundaries as plain dictionaries:

==============  ==========================================================
Entry           Dictionary
==============  ==========================================================
Added           ``{"type": "Added", "path": p, "newValue": v}``
Removed         ``{"type": "Removed", "path": p, "value": v}``
Modified        ``{"type": "Modified", "path": p, "oldValue": a, "newValue": b}``
TypeChanged     ``{"type": "TypeChanged", "path": p, "oldValue": a, "newValue": b}``
==============  ==========================================================

Values in the dictionary form are plain Python data (see
:func:`semdiff.model.to_python`).
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Mapping

from semdiff.exceptions import ValidationError
from semdiff.model import Value, from_python, to_json_compatible, to_python


class ChangeKind(str, Enum):
    """Kind of a diff entry."""

    ADDED = "Added"
    REMOVED = "Removed"
    MODIFIED = "Modified"
    TYPE_CHANGED = "TypeChanged"


@dataclass(frozen=True)
class DiffEntry(ABC):
    """Base class for all diff entries.

    Parameters
    ----------
    path : str
        Location of the difference; the root is ``""``

    """

    kind: ClassVar[ChangeKind]

    path: str


@dataclass(frozen=True)
class Added(DiffEntry):
    """A key or array element present only in the new tree."""

    kind: ClassVar[ChangeKind] = ChangeKind.ADDED

    value: Value


@dataclass(frozen=True)
class Removed(DiffEntry):
    """A key or array element present only in the old tree."""

    kind: ClassVar[ChangeKind] = ChangeKind.REMOVED

    value: Value


@dataclass(frozen=True)
class Modified(DiffEntry):
    """Scalars of the same kind with different values."""

    kind: ClassVar[ChangeKind] = ChangeKind.MODIFIED

    old_value: Value
    new_value: Value


@dataclass(frozen=True)
class TypeChanged(DiffEntry):
    """Values of different kinds at the same path; the subtrees are not compared."""

    kind: ClassVar[ChangeKind] = ChangeKind.TYPE_CHANGED

    old_value: Value
    new_value: Value


_ENTRY_CLASSES: dict[ChangeKind, type[DiffEntry]] = {
    ChangeKind.ADDED: Added,
    ChangeKind.REMOVED: Removed,
    ChangeKind.MODIFIED: Modified,
    ChangeKind.TYPE_CHANGED: TypeChanged,
}


@dataclass(frozen=True)
class DiffReport:
    """Outcome of a comparison.

    Parameters
    ----------
    entries : tuple of DiffEntry
        Differences in traversal order. Holds at most one entry in brief mode
        and none in quiet mode.
    differs : bool
        Whether any difference passing the path filter was found. This is the
        only signal available in quiet mode.

    """

    entries: tuple[DiffEntry, ...] = field(default_factory=tuple)
    differs: bool = False

    def __bool__(self) -> bool:
        return self.differs

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


def entry_to_dict(entry: DiffEntry, json_compatible: bool = False) -> dict[str, Any]:
    """Convert an entry to its external dictionary shape.

    With ``json_compatible`` set, NaN and infinite numbers are spelled as
    strings (see :func:`~semdiff.model.to_json_compatible`) so the result is
    strict JSON data.

    Examples
    --------
        >>> entry_to_dict(Modified("b", Number(2), Number(3)))
        {'type': 'Modified', 'path': 'b', 'oldValue': 2, 'newValue': 3}

    """
    convert = to_json_compatible if json_compatible else to_python
    data: dict[str, Any] = {"type": entry.kind.value, "path": entry.path}
    if isinstance(entry, Added):
        data["newValue"] = convert(entry.value)
    elif isinstance(entry, Removed):
        data["value"] = convert(entry.value)
    elif isinstance(entry, (Modified, TypeChanged)):
        data["oldValue"] = convert(entry.old_value)
        data["newValue"] = convert(entry.new_value)
    else:
        raise ValidationError(
            f"Unsupported diff entry type: {type(entry).__name__}",
            parameter_name="entry",
            parameter_value=entry,
        )
    return data


def entry_from_dict(data: Mapping[str, Any]) -> DiffEntry:
    """Build an entry from its external dictionary shape.

    The entry type is read from ``"type"`` or, as emitted by some bindings,
    ``"diffType"``.

    Raises
    ------
    ValidationError
        If the type is missing or unknown, the path is not a string, or a
        value field required by the entry type is absent

    """
    if not isinstance(data, Mapping):
        raise ValidationError(
            f"Diff entry must be a mapping, got {type(data).__name__}",
            parameter_name="entry",
            parameter_value=data,
        )

    type_name = data.get("type", data.get("diffType"))
    try:
        kind = ChangeKind(type_name)
    except ValueError as e:
        raise ValidationError(
            f"Unknown diff entry type {type_name!r}. Expected one of: {', '.join(k.value for k in ChangeKind)}",
            parameter_name="type",
            parameter_value=type_name,
            original_error=e,
        ) from e

    path = data.get("path")
    if not isinstance(path, str):
        raise ValidationError(
            f"{kind.value} entry requires a string 'path'",
            parameter_name="path",
            parameter_value=path,
        )

    def required(name: str) -> Value:
        if name not in data:
            raise ValidationError(
                f"{kind.value} entry at {path!r} is missing '{name}'",
                parameter_name=name,
            )
        return from_python(data[name])

    if kind is ChangeKind.ADDED:
        return Added(path, required("newValue"))
    if kind is ChangeKind.REMOVED:
        return Removed(path, required("value"))
    return _ENTRY_CLASSES[kind](path, required("oldValue"), required("newValue"))  # type: ignore[call-arg]
