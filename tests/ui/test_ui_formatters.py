"""Tests for terminal error formatting."""

from draftval import validate
from draftval.domain.errors import ErrorKind, SchemaError
from draftval.ui import describe_error, format_error_tree


def test_format_error_tree(load_json):
    """Test path lines for a nested document error."""
    schema = load_json("address-and-phone.schema.json")
    error = validate(schema, load_json("address-and-phone-city-and-code-missing.json"))
    assert format_error_tree(error) == [
        "$.address.city: required property is missing"
    ]


def test_array_paths():
    """Test that array positions render as [index]."""
    error = validate({"type": "array", "items": {"type": "string"}}, ["a", "b", 3])
    assert format_error_tree(error) == ["$[2]: expected string, got 3"]


def test_describe_bounds():
    """Test bound descriptions."""
    assert describe_error(
        SchemaError(ErrorKind.OUT_OF_BOUNDS, data=5, minimum=5, exclusive=True)
    ) == "5 must be > 5"
    assert describe_error(
        SchemaError(ErrorKind.OUT_OF_BOUNDS, data=11, maximum=10, exclusive=False)
    ) == "11 must be <= 10"


def test_describe_enum():
    """Test enum descriptions."""
    error = SchemaError(
        ErrorKind.INVALID_ENUM_VALUE, data="c", allowed_values=("a", "b")
    )
    assert describe_error(error) == '"c" is not one of ["a", "b"]'


def test_describe_items_count():
    """Test element count descriptions."""
    error = SchemaError(ErrorKind.WRONG_NUMBER_OF_ELEMENTS, minimum=2, actual=1)
    assert describe_error(error) == "expected at least 2 items, got 1"


def test_describe_ref():
    """Test reference descriptions."""
    error = SchemaError(
        ErrorKind.CIRCULAR_REFERENCE, schema_root={}, schema_uri="#"
    )
    assert describe_error(error) == "circular $ref '#'"


def test_long_values_truncated():
    """Test that long data renderings are shortened."""
    error = SchemaError(ErrorKind.WRONG_TYPE, expected="integer", data="x" * 100)
    description = describe_error(error)
    assert description.endswith("...")
    assert len(description) < 100
