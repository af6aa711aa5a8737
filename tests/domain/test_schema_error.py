"""Tests for the SchemaError value model."""

from draftval.domain.errors import ErrorKind, SchemaError


def test_kind_values_are_hyphenated():
    """Test the public kind strings."""
    assert ErrorKind.UNABLE_TO_RESOLVE_REFERENCED_SCHEMA.value == (
        "unable-to-resolve-referenced-schema"
    )
    assert ErrorKind.PROPERTIES.is_aggregate
    assert ErrorKind.ARRAY_ITEMS.is_aggregate
    assert not ErrorKind.WRONG_TYPE.is_aggregate


def test_has_data_distinguishes_null():
    """Test that a JSON null is recorded data, not an unset field."""
    assert SchemaError(ErrorKind.WRONG_TYPE, data=None).has_data
    assert not SchemaError(ErrorKind.MISSING_PROPERTY).has_data


def test_at_position_copies():
    """Test that tagging a position leaves the original untouched."""
    error = SchemaError(ErrorKind.WRONG_TYPE, expected="string", data=1)
    tagged = error.at_position(3)
    assert tagged.position == 3
    assert error.position is None
    assert tagged.expected == "string"


class TestToDict:
    """Test JSON-ready rendering."""

    def test_leaf(self):
        """Test rendering of a leaf error."""
        error = SchemaError(
            ErrorKind.OUT_OF_BOUNDS, data=5, minimum=5, exclusive=True
        )
        assert error.to_dict() == {
            "error": "out-of-bounds",
            "data": 5,
            "minimum": 5,
            "exclusive": True,
        }

    def test_null_data_kept(self):
        """Test that null data is rendered."""
        error = SchemaError(ErrorKind.WRONG_TYPE, expected="string", data=None)
        assert error.to_dict() == {
            "error": "wrong-type",
            "data": None,
            "expected": "string",
        }

    def test_marker_without_data(self):
        """Test that a missing-property marker renders only its kind."""
        assert SchemaError(ErrorKind.MISSING_PROPERTY).to_dict() == {
            "error": "missing-property"
        }

    def test_nested(self):
        """Test rendering of aggregate errors."""
        item = SchemaError(ErrorKind.WRONG_TYPE, expected="integer", data="x")
        error = SchemaError(
            ErrorKind.PROPERTIES,
            data={"a": ["x"]},
            properties={
                "a": SchemaError(
                    ErrorKind.ARRAY_ITEMS,
                    data=["x"],
                    items={0: item.at_position(0)},
                )
            },
        )
        rendered = error.to_dict()
        assert rendered["error"] == "properties"
        child = rendered["properties"]["a"]
        assert child["items"]["0"] == {
            "error": "wrong-type",
            "data": "x",
            "expected": "integer",
            "position": 0,
        }

    def test_enum_and_ref_fields(self):
        """Test hyphenated field names."""
        enum_error = SchemaError(
            ErrorKind.INVALID_ENUM_VALUE, data=3, allowed_values=(1, 2)
        )
        assert enum_error.to_dict()["allowed-values"] == [1, 2]

        ref_error = SchemaError(
            ErrorKind.UNABLE_TO_RESOLVE_REFERENCED_SCHEMA,
            schema_root={"a": 1},
            schema_uri="x.json",
        )
        assert ref_error.to_dict() == {
            "error": "unable-to-resolve-referenced-schema",
            "schema-root": {"a": 1},
            "schema-uri": "x.json",
        }


def test_iter_leaves_paths():
    """Test $-rooted paths for every leaf."""
    error = SchemaError(
        ErrorKind.PROPERTIES,
        data={},
        properties={
            "address": SchemaError(
                ErrorKind.PROPERTIES,
                data={},
                properties={"city": SchemaError(ErrorKind.MISSING_PROPERTY)},
            ),
            "phones": SchemaError(
                ErrorKind.ARRAY_ITEMS,
                data=[],
                items={2: SchemaError(ErrorKind.WRONG_TYPE, data=1)},
            ),
        },
    )
    paths = [path for path, _ in error.iter_leaves()]
    assert paths == ["$.address.city", "$.phones[2]"]


def test_iter_leaves_single():
    """Test that a leaf error yields itself at the root."""
    error = SchemaError(ErrorKind.WRONG_TYPE, data=1)
    assert list(error.iter_leaves()) == [("$", error)]
