#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/model/test_values.py
"""Unit tests for the canonical value model.

Tests cover:
- Variant construction and kinds
- Number rejecting booleans
- Array and Object container behavior
- Visitor dispatch

"""

import dataclasses

import pytest

from semdiff.model import (
    SCALAR_KINDS,
    Array,
    Bool,
    Null,
    Number,
    Object,
    String,
    ValueKind,
    ValueVisitor,
    make_object,
)


@pytest.mark.unit
class TestValueKinds:
    """Tests for variant kinds."""

    @pytest.mark.parametrize(
        "value,kind",
        [
            (Null(), ValueKind.NULL),
            (Bool(True), ValueKind.BOOL),
            (Number(1), ValueKind.NUMBER),
            (String("x"), ValueKind.STRING),
            (Array(()), ValueKind.ARRAY),
            (Object({}), ValueKind.OBJECT),
        ],
    )
    def test_kind(self, value, kind):
        """Test each variant reports its kind."""
        assert value.kind is kind

    def test_kind_names(self):
        """Test kind values are the names used in reports."""
        assert [kind.value for kind in ValueKind] == ["Null", "Bool", "Number", "String", "Array", "Object"]

    def test_scalar_kinds(self):
        """Test containers are not scalar kinds."""
        assert ValueKind.ARRAY not in SCALAR_KINDS
        assert ValueKind.OBJECT not in SCALAR_KINDS
        assert ValueKind.NUMBER in SCALAR_KINDS

    def test_is_container(self):
        """Test container detection."""
        assert Array(()).is_container
        assert Object({}).is_container
        assert not String("a").is_container


@pytest.mark.unit
class TestNumber:
    """Tests for the Number variant."""

    def test_int_and_float(self):
        """Test integers and floats are both accepted."""
        assert Number(3).value == 3
        assert Number(2.5).value == 2.5

    def test_rejects_bool(self):
        """Test booleans are never numbers."""
        with pytest.raises(TypeError):
            Number(True)

    def test_rejects_string(self):
        """Test non-numeric payloads are rejected."""
        with pytest.raises(TypeError):
            Number("1")

    def test_bool_and_number_differ(self):
        """Test Bool(True) and Number(1) are different values."""
        assert Bool(True) != Number(1)


@pytest.mark.unit
class TestContainers:
    """Tests for Array and Object."""

    def test_array_list_becomes_tuple(self):
        """Test list input is normalized to a tuple."""
        array = Array([Number(1), Number(2)])
        assert array.items == (Number(1), Number(2))
        assert len(array) == 2
        assert array[1] == Number(2)
        assert list(array) == [Number(1), Number(2)]

    def test_object_preserves_insertion_order(self):
        """Test keys keep their document order."""
        obj = Object({"z": Number(1), "a": Number(2), "m": Number(3)})
        assert obj.keys() == ["z", "a", "m"]
        assert obj.items()[0] == ("z", Number(1))

    def test_object_mapping_access(self):
        """Test membership, lookup and get."""
        obj = Object({"a": Null()})
        assert "a" in obj
        assert "b" not in obj
        assert obj["a"] == Null()
        assert obj.get("b") is None
        assert obj.get("b", String("d")) == String("d")
        assert len(obj) == 1

    def test_object_rejects_non_string_keys(self):
        """Test keys must be strings."""
        with pytest.raises(TypeError):
            Object({1: Null()})

    def test_object_copies_input(self):
        """Test later mutation of the source mapping does not leak in."""
        source = {"a": Number(1)}
        obj = make_object(source)
        source["b"] = Number(2)
        assert obj.keys() == ["a"]

    def test_make_object_keywords(self):
        """Test keyword members are appended."""
        obj = make_object({"a": Number(1)}, b=Number(2))
        assert obj.keys() == ["a", "b"]

    def test_values_are_frozen(self):
        """Test values are immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            String("a").value = "b"

    def test_structural_equality(self):
        """Test equal structures compare equal."""
        assert Object({"a": Array([String("x")])}) == Object({"a": Array([String("x")])})


class _KindCollector(ValueVisitor):
    def visit_null(self, value):
        return ["Null"]

    def visit_bool(self, value):
        return ["Bool"]

    def visit_number(self, value):
        return ["Number"]

    def visit_string(self, value):
        return ["String"]

    def visit_array(self, value):
        result = ["Array"]
        for item in value:
            result.extend(item.accept(self))
        return result

    def visit_object(self, value):
        result = ["Object"]
        for _, item in value.items():
            result.extend(item.accept(self))
        return result


@pytest.mark.unit
class TestVisitor:
    """Tests for visitor dispatch."""

    def test_visits_every_node_in_order(self):
        """Test accept dispatches to the matching visit method."""
        tree = Object({"a": Array([Number(1), Null()]), "b": Bool(False), "c": String("s")})
        assert tree.accept(_KindCollector()) == ["Object", "Array", "Number", "Null", "Bool", "String"]
