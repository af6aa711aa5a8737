"""Numeric bound and string format checks."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from draftval.constants import (
    FORMAT_DATE_TIME,
    KEY_EXCLUSIVE_MAXIMUM,
    KEY_EXCLUSIVE_MINIMUM,
    KEY_FORMAT,
    KEY_MAXIMUM,
    KEY_MINIMUM,
)
from draftval.core.value import is_number, is_truthy
from draftval.domain.errors import ErrorKind, SchemaError


def validate_number_bounds(
    schema: Mapping[str, Any], data: int | float
) -> SchemaError | None:
    """Check minimum/maximum with optional exclusivity.

    Checks run min-exclusive, min-inclusive, max-exclusive, max-inclusive
    and the first violation is returned. Non-numeric bounds are ignored.

    Args:
        schema: Schema carrying the bound keywords.
        data: Numeric value to check.

    Returns:
        out-of-bounds error, or None when within bounds.

    """
    minimum = schema.get(KEY_MINIMUM)
    maximum = schema.get(KEY_MAXIMUM)
    exclusive_min = is_truthy(schema.get(KEY_EXCLUSIVE_MINIMUM))
    exclusive_max = is_truthy(schema.get(KEY_EXCLUSIVE_MAXIMUM))

    if is_number(minimum) and exclusive_min and data <= minimum:
        return SchemaError(
            ErrorKind.OUT_OF_BOUNDS, data=data, minimum=minimum, exclusive=True
        )
    if is_number(minimum) and data < minimum:
        return SchemaError(
            ErrorKind.OUT_OF_BOUNDS, data=data, minimum=minimum, exclusive=False
        )
    if is_number(maximum) and exclusive_max and data >= maximum:
        return SchemaError(
            ErrorKind.OUT_OF_BOUNDS, data=data, maximum=maximum, exclusive=True
        )
    if is_number(maximum) and data > maximum:
        return SchemaError(
            ErrorKind.OUT_OF_BOUNDS, data=data, maximum=maximum, exclusive=False
        )
    return None


def is_date_time(value: str) -> bool:
    """Check if a string parses as an ISO-8601 timestamp.

    A trailing ``Z`` is accepted as UTC.
    """
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return False
    return True


def validate_string_format(
    schema: Mapping[str, Any], data: str
) -> SchemaError | None:
    """Check the ``format`` keyword; only date-time is enforced."""
    if schema.get(KEY_FORMAT) == FORMAT_DATE_TIME and not is_date_time(data):
        return SchemaError(
            ErrorKind.WRONG_FORMAT, data=data, expected=FORMAT_DATE_TIME
        )
    return None
