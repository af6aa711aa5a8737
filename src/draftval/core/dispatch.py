"""Type dispatch and scalar type validators.

The schema's ``type`` keyword selects the checker. Schemas without a
``type`` (or with an unknown one) constrain nothing beyond ``enum`` and
``$ref``, which the entry point handles before dispatch. The exception is
an untyped schema with object keywords, which still checks the declared
keys of object data.
"""

from collections.abc import Mapping
from typing import Any

from draftval.constants import (
    KEY_PATTERN_PROPERTIES,
    KEY_PROPERTIES,
    KEY_REQUIRED,
    KEY_TYPE,
    TYPE_BOOLEAN,
    TYPE_INTEGER,
    TYPE_NUMBER,
    TYPE_STRING,
)
from draftval.core.arrays import validate_array
from draftval.core.bounds import validate_number_bounds, validate_string_format
from draftval.core.objects import validate_object
from draftval.core.options import ValidationOptions
from draftval.core.value import is_boolean, is_integer, is_number
from draftval.domain.errors import ErrorKind, SchemaError


def _has_object_keywords(schema: Mapping[str, Any]) -> bool:
    """Check if an untyped schema declares object constraints.

    A boolean ``required`` is a draft-3 property flag, not a name list.
    """
    return (
        KEY_PROPERTIES in schema
        or KEY_PATTERN_PROPERTIES in schema
        or isinstance(schema.get(KEY_REQUIRED), list)
    )


def validate_integer(schema: Mapping[str, Any], data: Any) -> SchemaError | None:
    """Validate an integer value and its bounds."""
    if not is_integer(data):
        return SchemaError(ErrorKind.WRONG_TYPE, expected=TYPE_INTEGER, data=data)
    return validate_number_bounds(schema, data)


def validate_number(schema: Mapping[str, Any], data: Any) -> SchemaError | None:
    """Validate a numeric value and its bounds."""
    if not is_number(data):
        return SchemaError(ErrorKind.WRONG_TYPE, expected=TYPE_NUMBER, data=data)
    return validate_number_bounds(schema, data)


def validate_string(schema: Mapping[str, Any], data: Any) -> SchemaError | None:
    """Validate a string value and its format."""
    if not isinstance(data, str):
        return SchemaError(ErrorKind.WRONG_TYPE, expected=TYPE_STRING, data=data)
    return validate_string_format(schema, data)


def validate_boolean(data: Any) -> SchemaError | None:
    """Validate that data is exactly True or False."""
    if not is_boolean(data):
        return SchemaError(ErrorKind.WRONG_TYPE, expected=TYPE_BOOLEAN, data=data)
    return None


def validate_by_type(
    schema: Any, data: Any, options: ValidationOptions
) -> SchemaError | None:
    """Route data to the validator named by the schema's ``type``.

    Args:
        schema: Resolved (non-$ref) schema node.
        data: Value to validate.
        options: Options threaded through nested calls.

    Returns:
        The validator's error, or None when valid.

    """
    if not isinstance(schema, Mapping):
        return None

    match schema.get(KEY_TYPE):
        case "object":
            return validate_object(schema, data, options)
        case "array":
            return validate_array(schema, data, options)
        case "string":
            return validate_string(schema, data)
        case "number":
            return validate_number(schema, data)
        case "integer":
            return validate_integer(schema, data)
        case "boolean":
            return validate_boolean(data)
        case None if isinstance(data, Mapping) and _has_object_keywords(schema):
            # Untyped object schemas check declared keys only
            return validate_object(schema, data, options, untyped=True)
        case _:
            return None
