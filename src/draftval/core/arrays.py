"""Array validator: minItems, maxItems, uniqueItems and items."""

from collections.abc import Mapping
from typing import Any

from draftval.constants import (
    EXPECTED_ARRAY_LIKE,
    KEY_ITEMS,
    KEY_MAX_ITEMS,
    KEY_MIN_ITEMS,
    KEY_UNIQUE_ITEMS,
)
from draftval.core.options import ValidationOptions
from draftval.core.value import count_distinct, is_array, is_number, is_truthy
from draftval.domain.errors import ErrorKind, SchemaError


def validate_array_items(
    item_schema: Any, data: list[Any] | tuple[Any, ...], options: ValidationOptions
) -> SchemaError | None:
    """Validate every element against a single item schema.

    Elements go through the full entry point, so ``$ref`` and ``enum`` in
    the item schema are honoured even without a ``type``.

    Returns:
        array-items aggregate keyed by original element index, or None.

    """
    # Import here to avoid circular dependency with the entry point
    from draftval.core.validator import validate  # noqa: PLC0415

    errors: dict[int, SchemaError] = {}
    for position, item in enumerate(data):
        error = validate(item_schema, item, options)
        if error is not None:
            errors[position] = error.at_position(position)

    if not errors:
        return None
    return SchemaError(ErrorKind.ARRAY_ITEMS, data=data, items=errors)


def validate_array(
    schema: Mapping[str, Any], data: Any, options: ValidationOptions
) -> SchemaError | None:
    """Validate an array.

    Size and uniqueness checks short-circuit: element schemas are only
    applied when the array as a whole is acceptable.

    Args:
        schema: Array schema.
        data: Value to validate.
        options: Options threaded through nested calls.

    Returns:
        The first failing array-level error, an array-items aggregate,
        or None.

    """
    if not is_array(data):
        return SchemaError(
            ErrorKind.WRONG_TYPE, expected=EXPECTED_ARRAY_LIKE, data=data
        )

    count = len(data)
    min_items = schema.get(KEY_MIN_ITEMS)
    max_items = schema.get(KEY_MAX_ITEMS)

    if is_number(min_items) and count < min_items:
        return SchemaError(
            ErrorKind.WRONG_NUMBER_OF_ELEMENTS, minimum=min_items, actual=count
        )
    if is_number(max_items) and count > max_items:
        return SchemaError(
            ErrorKind.WRONG_NUMBER_OF_ELEMENTS, maximum=max_items, actual=count
        )
    if is_truthy(schema.get(KEY_UNIQUE_ITEMS)) and count_distinct(data) != count:
        return SchemaError(ErrorKind.DUPLICATE_ITEMS_NOT_ALLOWED, data=data)

    item_schema = schema.get(KEY_ITEMS)
    if item_schema is None:
        return None
    return validate_array_items(item_schema, data, options)
