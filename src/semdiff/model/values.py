#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/model/values.py
"""Canonical value classes shared by every format parser and the diff engine.

Every parser produces a tree built exclusively from the six variants defined
here, which decouples the diff engine from the type systems of the source
formats.

Value Variants
--------------
All values inherit from the abstract :class:`Value` base class and support
the visitor pattern.

Scalars:
    - Null, Bool, Number, String

Containers:
    - Array (ordered sequence, position is the only identity)
    - Object (insertion-ordered mapping of unique string keys)

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Mapping, Union


class ValueKind(str, Enum):
    """Kind tag of a canonical value."""

    NULL = "Null"
    BOOL = "Bool"
    NUMBER = "Number"
    STRING = "String"
    ARRAY = "Array"
    OBJECT = "Object"


class Value(ABC):
    """Base class for all canonical values.

    Subclasses form a closed set; code that dispatches on values may assume
    one of the six concrete variants.
    """

    kind: ValueKind

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this value.

        Parameters
        ----------
        visitor : Any
            A visitor object with ``visit_*`` methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """

    @property
    def is_container(self) -> bool:
        """Whether this value holds child values."""
        return self.kind in (ValueKind.ARRAY, ValueKind.OBJECT)


@dataclass(frozen=True)
class Null(Value):
    """The absent/null value (JSON ``null``, YAML ``~``, valueless INI keys)."""

    kind = ValueKind.NULL

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_null``."""
        return visitor.visit_null(self)


@dataclass(frozen=True)
class Bool(Value):
    """A boolean value.

    Parameters
    ----------
    value : bool
        The boolean payload

    """

    value: bool
    kind = ValueKind.BOOL

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_bool``."""
        return visitor.visit_bool(self)


@dataclass(frozen=True)
class Number(Value):
    """A numeric value.

    Integers and floats from every format share this variant; the payload
    keeps the Python type it was parsed as so integral values render without
    a trailing ``.0``.

    Parameters
    ----------
    value : int or float
        The numeric payload (never a ``bool``)

    """

    value: Union[int, float]
    kind = ValueKind.NUMBER

    def __post_init__(self) -> None:
        """Reject booleans, which are ints in Python but a separate variant here."""
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"Number requires an int or float, got {type(self.value).__name__}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_number``."""
        return visitor.visit_number(self)


@dataclass(frozen=True)
class String(Value):
    """A text value.

    Parameters
    ----------
    value : str
        The text payload

    """

    value: str
    kind = ValueKind.STRING

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_string``."""
        return visitor.visit_string(self)


@dataclass(frozen=True)
class Array(Value):
    """An ordered sequence of values.

    Parameters
    ----------
    items : tuple of Value, default = empty tuple
        Elements in document order

    """

    items: tuple[Value, ...] = ()
    kind = ValueKind.ARRAY

    def __post_init__(self) -> None:
        """Normalize list input to a tuple."""
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        """Return the number of elements."""
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        """Iterate over elements in order."""
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        """Return the element at ``index``."""
        return self.items[index]

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_array``."""
        return visitor.visit_array(self)


@dataclass(frozen=True)
class Object(Value):
    """An insertion-ordered mapping from unique string keys to values.

    Key order is meaningful: it determines the order of diff entries.

    Parameters
    ----------
    fields : dict of str to Value, default = empty dict
        Members in document order

    """

    fields: dict[str, Value] = field(default_factory=dict)
    kind = ValueKind.OBJECT

    def __post_init__(self) -> None:
        """Copy mapping input so later mutation of the source cannot leak in."""
        if not isinstance(self.fields, dict):
            object.__setattr__(self, "fields", dict(self.fields))
        for key in self.fields:
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be str, got {type(key).__name__}")

    def __len__(self) -> int:
        """Return the number of members."""
        return len(self.fields)

    def __contains__(self, key: object) -> bool:
        """Return whether ``key`` is a member."""
        return key in self.fields

    def __getitem__(self, key: str) -> Value:
        """Return the value stored under ``key``."""
        return self.fields[key]

    def keys(self) -> list[str]:
        """Return member keys in insertion order."""
        return list(self.fields)

    def items(self) -> list[tuple[str, Value]]:
        """Return ``(key, value)`` pairs in insertion order."""
        return list(self.fields.items())

    def get(self, key: str, default: Value | None = None) -> Value | None:
        """Return the value for ``key`` or ``default``."""
        return self.fields.get(key, default)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_object``."""
        return visitor.visit_object(self)


SCALAR_KINDS = frozenset({ValueKind.NULL, ValueKind.BOOL, ValueKind.NUMBER, ValueKind.STRING})


def make_object(members: Mapping[str, Value] | None = None, **kwargs: Value) -> Object:
    """Build an :class:`Object` from a mapping and/or keyword members."""
    fields: dict[str, Value] = dict(members or {})
    fields.update(kwargs)
    return Object(fields)


class ValueVisitor(ABC):
    """Abstract base class for canonical value visitors.

    Subclasses implement one ``visit_*`` method per variant.

    Examples
    --------
    Count the scalars in a tree:

        >>> class ScalarCounter(ValueVisitor):
        ...     def visit_null(self, value): return 1
        ...     def visit_bool(self, value): return 1
        ...     def visit_number(self, value): return 1
        ...     def visit_string(self, value): return 1
        ...     def visit_array(self, value): return sum(v.accept(self) for v in value)
        ...     def visit_object(self, value): return sum(v.accept(self) for _, v in value.items())

    """

    @abstractmethod
    def visit_null(self, value: Null) -> Any:
        """Visit a Null value."""

    @abstractmethod
    def visit_bool(self, value: Bool) -> Any:
        """Visit a Bool value."""

    @abstractmethod
    def visit_number(self, value: Number) -> Any:
        """Visit a Number value."""

    @abstractmethod
    def visit_string(self, value: String) -> Any:
        """Visit a String value."""

    @abstractmethod
    def visit_array(self, value: Array) -> Any:
        """Visit an Array value."""

    @abstractmethod
    def visit_object(self, value: Object) -> Any:
        """Visit an Object value."""
