#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/model/__init__.py
"""Canonical value model.

All format parsers produce trees of these values and the diff engine
operates exclusively on them.

Examples
--------
    >>> from semdiff.model import Object, Number, String
    >>> value = Object({"name": String("Alice"), "age": Number(30)})
    >>> value["age"]
    Number(value=30)

"""

from semdiff.model.serialization import (
    JsonCompatibleConverter,
    PythonConverter,
    from_python,
    to_json_compatible,
    to_python,
    value_to_json,
)
from semdiff.model.values import (
    SCALAR_KINDS,
    Array,
    Bool,
    Null,
    Number,
    Object,
    String,
    Value,
    ValueKind,
    ValueVisitor,
    make_object,
)

__all__ = [
    "SCALAR_KINDS",
    "Array",
    "Bool",
    "JsonCompatibleConverter",
    "Null",
    "Number",
    "Object",
    "PythonConverter",
    "String",
    "Value",
    "ValueKind",
    "ValueVisitor",
    "from_python",
    "make_object",
    "to_json_compatible",
    "to_python",
    "value_to_json",
]
