"""Tests for the JSON value model helpers."""

import pytest

from draftval.core.value import (
    canonical_key,
    contains_value,
    count_distinct,
    is_array,
    is_boolean,
    is_integer,
    is_number,
    is_object,
    is_truthy,
)


class TestPredicates:
    """Test value shape predicates."""

    def test_booleans_are_not_numbers(self):
        """Test that True/False are not numbers or integers."""
        assert not is_number(True)
        assert not is_integer(False)
        assert is_boolean(True)

    def test_integer_excludes_whole_floats(self):
        """Test that 5.0 is a number but not an integer."""
        assert is_number(5.0)
        assert not is_integer(5.0)
        assert is_integer(5)

    def test_array_like(self):
        """Test that lists and tuples are array-like, strings are not."""
        assert is_array([1, 2])
        assert is_array((1, 2))
        assert not is_array("12")

    def test_object(self):
        """Test that mappings are objects."""
        assert is_object({})
        assert not is_object([])


class TestCanonicalKey:
    """Test JSON value equality via canonical keys."""

    def test_true_and_one_differ(self):
        """Test that True and 1 are distinct JSON values."""
        assert canonical_key(True) != canonical_key(1)
        assert canonical_key(False) != canonical_key(0)

    def test_int_and_float_equal(self):
        """Test that 1 and 1.0 are the same JSON number."""
        assert canonical_key(1) == canonical_key(1.0)

    def test_object_key_order_ignored(self):
        """Test that object equality ignores key order."""
        assert canonical_key({"a": 1, "b": [1, 2]}) == canonical_key(
            {"b": [1, 2], "a": 1}
        )

    def test_arrays_compare_elementwise(self):
        """Test that arrays are ordered and element-wise compared."""
        assert canonical_key([1, 2]) != canonical_key([2, 1])
        assert canonical_key([1, [True]]) != canonical_key([1, [1]])

    def test_null(self):
        """Test that null is its own value."""
        assert canonical_key(None) != canonical_key(False)


def test_count_distinct_uses_json_equality():
    """Test distinct counting keeps booleans apart from numbers."""
    assert count_distinct([1, True, 1.0, {"a": 1}, {"a": 1}]) == 3


def test_contains_value():
    """Test enum-style membership."""
    assert contains_value(["a", 1, None], None)
    assert not contains_value([1, 2], True)
    assert contains_value([{"x": [1]}], {"x": [1.0]})


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, False),
        (False, False),
        (True, True),
        ({}, True),
        (0, True),
        ("", True),
    ],
)
def test_is_truthy(value, expected):
    """Test that only None and False count as unset flags."""
    assert is_truthy(value) is expected
