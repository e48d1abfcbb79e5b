#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/diff/test_diff_entries.py
"""Unit tests for diff entries, their dictionary shape and path rendering."""

import pytest

from semdiff.diff import Added, ChangeKind, DiffReport, Modified, Removed, TypeChanged, entry_from_dict, entry_to_dict
from semdiff.diff.paths import IdentitySegment, IndexSegment, KeySegment, display_path, join_path
from semdiff.exceptions import ValidationError
from semdiff.model import Array, Null, Number, Object, String


@pytest.mark.unit
class TestPathRendering:
    """Tests for path segment joining."""

    def test_root(self):
        """Test the root path is empty."""
        assert join_path([]) == ""
        assert display_path("") == "(root)"
        assert display_path("a.b") == "a.b"

    def test_keys(self):
        """Test keys are joined with dots."""
        assert join_path([KeySegment("a"), KeySegment("b")]) == "a.b"

    def test_indices(self):
        """Test indices render in brackets without a dot."""
        assert join_path([IndexSegment(2)]) == "[2]"
        assert join_path([KeySegment("items"), IndexSegment(2), KeySegment("name")]) == "items[2].name"

    def test_identity(self):
        """Test identity segments."""
        assert join_path([KeySegment("users"), IdentitySegment("id", '"abc"')]) == 'users[id="abc"]'
        assert join_path([IdentitySegment("id", "1"), KeySegment("v")]) == "[id=1].v"


@pytest.mark.unit
class TestEntries:
    """Tests for the entry dataclasses."""

    def test_kinds(self):
        """Test each entry type reports its kind."""
        assert Added("a", Null()).kind is ChangeKind.ADDED
        assert Removed("a", Null()).kind is ChangeKind.REMOVED
        assert Modified("a", Null(), Null()).kind is ChangeKind.MODIFIED
        assert TypeChanged("a", Null(), Number(1)).kind is ChangeKind.TYPE_CHANGED

    def test_kind_is_not_a_field(self):
        """Test kind does not take part in construction or equality."""
        assert Added("a", Null()) == Added("a", Null())
        assert Added("a", Null()) != Removed("a", Null())

    def test_report_defaults(self):
        """Test an empty report."""
        report = DiffReport()
        assert report.entries == ()
        assert not report.differs
        assert len(report) == 0


@pytest.mark.unit
class TestEntryDictShape:
    """Tests for entry_to_dict and entry_from_dict."""

    def test_modified_shape(self):
        """Test Modified carries oldValue and newValue."""
        assert entry_to_dict(Modified("b", Number(2), Number(3))) == {
            "type": "Modified",
            "path": "b",
            "oldValue": 2,
            "newValue": 3,
        }

    def test_added_shape(self):
        """Test Added carries newValue."""
        assert entry_to_dict(Added("x", Array([Number(1)]))) == {"type": "Added", "path": "x", "newValue": [1]}

    def test_removed_shape(self):
        """Test Removed carries value."""
        assert entry_to_dict(Removed("x", Object({"k": Null()}))) == {
            "type": "Removed",
            "path": "x",
            "value": {"k": None},
        }

    def test_type_changed_shape(self):
        """Test TypeChanged carries both values."""
        assert entry_to_dict(TypeChanged("a", Number(1), String("1"))) == {
            "type": "TypeChanged",
            "path": "a",
            "oldValue": 1,
            "newValue": "1",
        }

    def test_key_order(self):
        """Test dictionary keys come in a fixed order."""
        assert list(entry_to_dict(Modified("b", Number(2), Number(3)))) == ["type", "path", "oldValue", "newValue"]

    @pytest.mark.parametrize(
        "entry",
        [
            Added("a.b", Object({"x": Array([Number(1), Null()])})),
            Removed("[0]", String("gone")),
            Modified("", Number(1), Number(2)),
            TypeChanged("k", Array([]), Object({})),
        ],
    )
    def test_from_dict_restores_entry(self, entry):
        """Test entries are rebuilt from their dictionary shape."""
        assert entry_from_dict(entry_to_dict(entry)) == entry

    def test_diff_type_key(self):
        """Test bindings may name the type field diffType."""
        entry = entry_from_dict({"diffType": "Removed", "path": "a", "value": 1})
        assert entry == Removed("a", Number(1))

    def test_unknown_type(self):
        """Test unknown entry types are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            entry_from_dict({"type": "Moved", "path": "a"})
        assert exc_info.value.parameter_name == "type"

    def test_missing_type(self):
        """Test a missing type is rejected."""
        with pytest.raises(ValidationError):
            entry_from_dict({"path": "a", "value": 1})

    @pytest.mark.parametrize(
        "data,missing",
        [
            ({"type": "Added", "path": "a", "value": 1}, "newValue"),
            ({"type": "Removed", "path": "a", "newValue": 1}, "value"),
            ({"type": "Modified", "path": "a", "newValue": 1}, "oldValue"),
            ({"type": "TypeChanged", "path": "a", "oldValue": 1}, "newValue"),
        ],
    )
    def test_missing_value_field(self, data, missing):
        """Test a missing value field for the entry type is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            entry_from_dict(data)
        assert exc_info.value.parameter_name == missing

    def test_null_value_is_present(self):
        """Test a JSON null value counts as present."""
        assert entry_from_dict({"type": "Added", "path": "a", "newValue": None}) == Added("a", Null())

    def test_path_must_be_string(self):
        """Test the path must be a string."""
        with pytest.raises(ValidationError):
            entry_from_dict({"type": "Added", "path": 3, "newValue": 1})

    def test_not_a_mapping(self):
        """Test non-mapping input is rejected."""
        with pytest.raises(ValidationError):
            entry_from_dict(["Added", "a", 1])
