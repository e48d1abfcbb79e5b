#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/model/serialization.py
"""Conversion between canonical values and plain Python data.

Parsers hand the output of their underlying libraries (``json``, ``yaml``,
``tomllib``...) to :func:`from_python`; renderers and host bindings use
:func:`to_python` and :func:`value_to_json` to get JSON-compatible data back.

Examples
--------
    >>> value = from_python({"name": "Alice", "tags": ["a", "b"]})
    >>> to_python(value)
    {'name': 'Alice', 'tags': ['a', 'b']}
    >>> value_to_json(value)
    '{"name": "Alice", "tags": ["a", "b"]}'

"""

from __future__ import annotations

import datetime
import json
import logging
import math
from typing import Any, Mapping, Sequence

from semdiff.exceptions import ValidationError
from semdiff.model.values import Array, Bool, Null, Number, Object, String, Value, ValueVisitor

logger = logging.getLogger(__name__)


def from_python(data: Any) -> Value:
    """Convert JSON-compatible Python data into a canonical value.

    Parameters
    ----------
    data : Any
        ``None``, ``bool``, ``int``, ``float``, ``str``, mappings, lists,
        tuples, or an existing :class:`Value` (returned unchanged).
        ``datetime``/``date``/``time`` objects become ISO-8601 strings;
        non-string mapping keys are converted with ``str()``.

    Returns
    -------
    Value
        The canonical representation

    Raises
    ------
    ValidationError
        If the data contains an unsupported type or is nested too deeply
        for the interpreter to convert

    """
    try:
        return _convert(data)
    except RecursionError as e:
        raise ValidationError(
            "Data is nested too deeply to convert", parameter_name="data", original_error=e
        ) from e


def _convert(data: Any) -> Value:
    if isinstance(data, Value):
        return data
    if data is None:
        return Null()
    if isinstance(data, bool):
        return Bool(data)
    if isinstance(data, (int, float)):
        return Number(data)
    if isinstance(data, str):
        return String(data)
    if isinstance(data, (datetime.datetime, datetime.date, datetime.time)):
        return String(data.isoformat())
    if isinstance(data, Mapping):
        return Object({_convert_key(key): _convert(item) for key, item in data.items()})
    if isinstance(data, Sequence) and not isinstance(data, (bytes, bytearray)):
        return Array(tuple(_convert(item) for item in data))

    raise ValidationError(
        f"Unsupported type for canonical value: {type(data).__name__}",
        parameter_name="data",
        parameter_value=data,
    )


def _convert_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        # Match the JSON spelling so YAML `true:` and JSON "true" keys line up
        return "true" if key else "false"
    if key is None:
        return "null"
    if isinstance(key, (datetime.datetime, datetime.date, datetime.time)):
        return key.isoformat()
    logger.debug(f"Coercing non-string key {key!r} to str")
    return str(key)


class PythonConverter(ValueVisitor):
    """Visitor that rebuilds plain Python data from a canonical value."""

    def visit_null(self, value: Null) -> None:
        """Return ``None``."""
        return None

    def visit_bool(self, value: Bool) -> bool:
        """Return the boolean payload."""
        return value.value

    def visit_number(self, value: Number) -> int | float:
        """Return the numeric payload."""
        return value.value

    def visit_string(self, value: String) -> str:
        """Return the text payload."""
        return value.value

    def visit_array(self, value: Array) -> list[Any]:
        """Return a list of converted elements."""
        return [item.accept(self) for item in value.items]

    def visit_object(self, value: Object) -> dict[str, Any]:
        """Return a dict of converted members in insertion order."""
        return {key: item.accept(self) for key, item in value.fields.items()}


class JsonCompatibleConverter(PythonConverter):
    """Visitor like :class:`PythonConverter` whose output is always valid JSON.

    JSON has no literal for NaN or the infinities, so non-finite numbers are
    spelled as the strings ``"NaN"``, ``"Infinity"`` and ``"-Infinity"``.
    """

    def visit_number(self, value: Number) -> int | float | str:
        """Return the numeric payload, or its name when it is not finite."""
        number = value.value
        if isinstance(number, float) and not math.isfinite(number):
            if math.isnan(number):
                return "NaN"
            return "Infinity" if number > 0 else "-Infinity"
        return number


def to_python(value: Value) -> Any:
    """Convert a canonical value into plain Python data.

    Non-finite numbers stay floats; use :func:`to_json_compatible` when the
    result must be strict JSON.

    Parameters
    ----------
    value : Value
        The value to convert

    Returns
    -------
    Any
        ``None``, ``bool``, ``int``, ``float``, ``str``, ``list`` or ``dict``

    """
    return value.accept(PythonConverter())


def to_json_compatible(value: Value) -> Any:
    """Convert a canonical value into plain data that ``json.dumps`` accepts with ``allow_nan=False``."""
    return value.accept(JsonCompatibleConverter())


def value_to_json(value: Value, indent: int | None = None) -> str:
    """Render a canonical value as JSON text.

    Without ``indent`` the result is a single line, which is the compact
    literal form used in native reports and identity paths.

    NaN and infinite numbers are written as the strings ``"NaN"``,
    ``"Infinity"`` and ``"-Infinity"`` so the text is always strict JSON.

    Parameters
    ----------
    value : Value
        The value to render
    indent : int or None, default None
        Indentation for pretty output

    Returns
    -------
    str
        JSON text (non-ASCII characters are kept as-is)

    """
    return json.dumps(to_json_compatible(value), indent=indent, ensure_ascii=False, allow_nan=False)
