"""Tests for the draft-4 metaschema check."""

import pytest

from draftval.exceptions import SchemaDefinitionError
from draftval.metaschema import check_schema


def test_valid_schema(load_json):
    """Test that a well-formed schema passes."""
    check_schema(load_json("address-and-phone.schema.json"), "address")


def test_wrong_keyword_type():
    """Test a schema with a wrongly typed keyword."""
    with pytest.raises(SchemaDefinitionError) as exc_info:
        check_schema({"type": "object", "minProperties": "two"}, "bad.json")
    error = exc_info.value
    assert error.target == "bad.json"
    assert error.path == "minProperties"
    assert "Expected type" in error.message


def test_invalid_type_name():
    """Test a schema with an unknown type name."""
    with pytest.raises(SchemaDefinitionError) as exc_info:
        check_schema({"type": "integerr"})
    assert exc_info.value.path == "type"


def test_root_level_error():
    """Test that a non-object schema is reported at the root."""
    with pytest.raises(SchemaDefinitionError) as exc_info:
        check_schema([1, 2])
    assert exc_info.value.path is None
    assert "(at 'root')" in exc_info.value.message
