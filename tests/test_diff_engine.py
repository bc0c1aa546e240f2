"""Tests for the structural diff engine in flexdiff/diff/engine.py."""

from __future__ import annotations

import copy

import pytest

from flexdiff.diff import (
    Added,
    ChangeType,
    Modified,
    Removed,
    compare,
    get_diff_summary,
    is_identical,
)
from flexdiff.parsing import parse_flexible


class TestCompareIdentity:
    """Tests for values without differences."""

    @pytest.mark.parametrize(
        "value",
        [None, True, 0, -1.5e10, "", "text", [], {}, [1, [2, [3]]], {"a": {"b": [None, False]}}],
    )
    def test_same_value(self, value):
        """Comparing a value with itself yields no changes."""
        assert compare(value, value) == []

    def test_deep_equal_clone(self, old_config):
        """A deep-equal clone yields no changes."""
        assert compare(old_config, copy.deepcopy(old_config)) == []

    def test_integer_and_float_with_same_value(self):
        """Numbers compare by value, without an int/float distinction."""
        assert compare({"n": 1}, {"n": 1.0}) == []

    def test_numbers_equal_as_doubles(self):
        """Integers beyond 2**53 equal the double they round to."""
        old = parse_flexible("9007199254740993")
        new = parse_flexible("9007199254740992.0")
        assert compare(old, new) == []
        assert compare({"n": [old]}, {"n": [new]}) == []

    def test_key_insertion_order_is_irrelevant(self):
        """Objects with the same entries in another order are identical."""
        assert compare({"a": 1, "b": 2}, {"b": 2, "a": 1}) == []


class TestCompareLeaves:
    """Tests for scalar comparisons."""

    @pytest.mark.parametrize(
        "old, new",
        [(1, 2), ("a", "b"), (True, False), (1, "1"), (True, 1), (0, False), (0.3, 0.1 + 0.2)],
    )
    def test_modified_both_directions(self, old, new):
        """A leaf change is one Modified at the root, swapped when reversed."""
        assert compare(old, new) == [Modified((), old, new)]
        assert compare(new, old) == [Modified((), new, old)]

    def test_scalar_versus_container(self):
        """A scalar replaced by a container is Modified without recursion."""
        assert compare("a", ["a"]) == [Modified((), "a", ["a"])]


class TestCompareNull:
    """Tests for null-equivalent handling."""

    def test_null_to_value_is_added(self):
        assert compare(None, 5) == [Added((), 5)]

    def test_value_to_null_is_removed(self):
        assert compare(5, None) == [Removed((), 5)]

    def test_null_to_null_is_unchanged(self):
        assert compare(None, None) == []

    def test_nested_null_to_value(self):
        """A key going from null to a value is reported as Added."""
        assert compare({"a": None}, {"a": {"b": 1}}) == [Added(("a",), {"b": 1})]

    def test_missing_key_with_null_value_is_added(self):
        """A new key is Added even when its value is null."""
        assert compare({}, {"a": None}) == [Added(("a",), None)]

    def test_removed_key_with_null_value(self):
        """A dropped key is Removed even when its value was null."""
        assert compare({"a": None}, {}) == [Removed(("a",), None)]


class TestCompareObjects:
    """Tests for object comparison."""

    def test_added_key(self):
        assert compare({}, {"x": 1}) == [Added(("x",), 1)]

    def test_removed_key(self):
        assert compare({"x": 1}, {}) == [Removed(("x",), 1)]

    def test_nested_path(self):
        """Paths accumulate through nested objects."""
        assert compare({"a": {"b": 1}}, {"a": {"b": 2}}) == [Modified(("a", "b"), 1, 2)]

    def test_container_kind_mismatch_at_root(self):
        """Object versus array is one Modified with the full values."""
        assert compare({"a": 1}, [1]) == [Modified((), {"a": 1}, [1])]

    def test_sorted_key_order(self):
        """Keys are visited in lexicographic order by default."""
        changes = compare({"b": 1, "a": 1, "C": 1}, {"b": 2, "a": 2, "C": 2})
        assert [change.path for change in changes] == [("C",), ("a",), ("b",)]

    def test_insertion_key_order(self):
        """Insertion order visits old keys first, then new-only keys."""
        changes = compare(
            {"b": 1, "a": 1},
            {"z": 1, "a": 2, "b": 2, "c": 1},
            key_order="insertion",
        )
        assert [change.path for change in changes] == [("b",), ("a",), ("z",), ("c",)]

    def test_unknown_key_order(self):
        """An unsupported key order is an argument error."""
        with pytest.raises(ValueError, match="Unsupported key order"):
            compare({}, {}, key_order="random")


class TestCompareArrays:
    """Tests for positional array comparison."""

    def test_appended_item(self):
        assert compare([1, 2, 3], [1, 2, 3, 4]) == [Added(("3",), 4)]

    def test_modified_item(self):
        assert compare([1, 2], [9, 2]) == [Modified(("0",), 1, 9)]

    def test_removed_items(self):
        assert compare([1, 2, 3], [1]) == [Removed(("1",), 2), Removed(("2",), 3)]

    def test_appended_null_is_added(self):
        """An appended null is still an addition."""
        assert compare([], [None]) == [Added(("0",), None)]

    def test_insertion_cascades(self):
        """Inserting at the front shifts every index; no move detection."""
        assert compare([1, 2, 3], [0, 1, 2, 3]) == [
            Modified(("0",), 1, 0),
            Modified(("1",), 2, 1),
            Modified(("2",), 3, 2),
            Added(("3",), 3),
        ]


class TestCompareOrderingAndPaths:
    """Tests for traversal order, path prefixes and robustness."""

    def test_depth_first_order(self):
        """Records come out in depth-first document order."""
        old = {"a": [1, {"b": 1}], "c": 1}
        new = {"a": [2, {"b": 2}, 3], "c": 2}

        assert compare(old, new) == [
            Modified(("a", "0"), 1, 2),
            Modified(("a", "1", "b"), 1, 2),
            Added(("a", "2"), 3),
            Modified(("c",), 1, 2),
        ]

    def test_config_comparison(self, old_config, new_config):
        """A realistic comparison mixes all change types."""
        assert compare(old_config, new_config) == [
            Modified(("env", "DEBUG"), False, True),
            Added(("env", "TRACE"), "on"),
            Removed(("legacy",), True),
            Modified(("ports", "1"), 443, 8443),
            Added(("ports", "2"), 9000),
            Modified(("version",), 1, 2),
        ]

    def test_deterministic(self, old_config, new_config):
        """The same inputs always give the same output."""
        assert compare(old_config, new_config) == compare(old_config, new_config)

    def test_path_prefix(self):
        """A path prefix is prepended to every record."""
        assert compare({"a": 1}, {"a": 2}, path=["doc"]) == [Modified(("doc", "a"), 1, 2)]

    def test_string_path_prefix_rejected(self):
        """A bare string prefix is not split into characters."""
        with pytest.raises(TypeError, match="sequence of segments"):
            compare({"a": 1}, {"a": 2}, path="doc")

    def test_array_indices_are_strings(self):
        """Array path segments are stringified indices."""
        (change,) = compare([[0, 1]], [[0, 2]])
        assert change.path == ("0", "1")
        assert all(isinstance(segment, str) for segment in change.path)

    def test_inputs_are_not_mutated(self, old_config, new_config):
        """compare never changes its inputs."""
        old_snapshot = copy.deepcopy(old_config)
        new_snapshot = copy.deepcopy(new_config)

        compare(old_config, new_config)

        assert old_config == old_snapshot
        assert new_config == new_snapshot

    def test_records_do_not_share_inputs(self):
        """Mutating the inputs after compare leaves the records unchanged."""
        old = {"a": {"x": [1]}, "gone": [1, 2]}
        new = {"a": [1], "added": {"y": 2}}

        changes = compare(old, new)
        old["a"]["x"].append(99)
        old["gone"].clear()
        new["a"].append(99)
        new["added"]["y"] = 3

        assert changes == [
            Modified(("a",), {"x": [1]}, [1]),
            Added(("added",), {"y": 2}),
            Removed(("gone",), [1, 2]),
        ]

    def test_very_deep_nesting(self):
        """Deep nesting does not exhaust the call stack."""
        depth = 5000
        old: object = 1
        new: object = 2
        for _ in range(depth):
            old = [old]
            new = [new]

        changes = compare(old, new)

        assert len(changes) == 1
        assert changes[0].change_type is ChangeType.MODIFIED
        assert changes[0].path == ("0",) * depth
        assert (changes[0].old_value, changes[0].new_value) == (1, 2)


class TestDiffSummary:
    """Tests for get_diff_summary and is_identical."""

    def test_summary_counts(self, old_config, new_config):
        summary = get_diff_summary(compare(old_config, new_config))
        assert summary == {"added": 2, "removed": 1, "modified": 3}

    def test_empty_summary(self):
        assert get_diff_summary([]) == {"added": 0, "removed": 0, "modified": 0}

    def test_is_identical(self, old_config, new_config):
        assert is_identical(old_config, copy.deepcopy(old_config))
        assert not is_identical(old_config, new_config)
