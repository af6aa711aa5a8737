"""Enum membership check, applicable to any data type."""

from collections.abc import Mapping
from typing import Any

from draftval.constants import KEY_ENUM
from draftval.core.value import contains_value
from draftval.domain.errors import ErrorKind, SchemaError


def validate_enum_value(schema: Any, data: Any) -> SchemaError | None:
    """Check data against the schema's ``enum`` list, if any.

    Args:
        schema: Schema node (non-mapping schemas carry no enum).
        data: Value to check.

    Returns:
        invalid-enum-value error, or None when enum is absent or matched.

    """
    if not isinstance(schema, Mapping):
        return None
    allowed = schema.get(KEY_ENUM)
    if not isinstance(allowed, (list, tuple)):
        return None
    if contains_value(allowed, data):
        return None
    return SchemaError(
        ErrorKind.INVALID_ENUM_VALUE,
        data=data,
        allowed_values=tuple(allowed),
    )
