"""Object validator: properties, patternProperties, additionalProperties
and required.
"""

import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from draftval.constants import (
    EXPECTED_MAP,
    KEY_ADDITIONAL_PROPERTIES,
    KEY_PATTERN_PROPERTIES,
    KEY_PROPERTIES,
    KEY_REQUIRED,
)
from draftval.core.options import ValidationOptions
from draftval.core.value import is_truthy
from draftval.domain.errors import ErrorKind, SchemaError
from draftval.logger import get_logger

logger = get_logger(__name__)

_MISSING_PROPERTY = SchemaError(ErrorKind.MISSING_PROPERTY)
_ADDITIONAL_PROPERTY = SchemaError(ErrorKind.ADDITIONAL_PROPERTY)


@lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> re.Pattern[str] | None:
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.warning("Ignoring invalid patternProperties regex %r: %s", pattern, e)
        return None


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def required_names(
    schema: Mapping[str, Any], options: ValidationOptions
) -> list[str]:
    """Compute the required property names, in declaration order.

    Draft 3 marks each required property with ``"required": true`` in its
    own subschema; draft 4 lists the names in the object schema.

    Args:
        schema: Object schema.
        options: Options selecting the draft-3 convention.

    Returns:
        Required property names without duplicates.

    """
    if options.draft3_required:
        properties = _as_mapping(schema.get(KEY_PROPERTIES))
        return [
            name
            for name, subschema in properties.items()
            if isinstance(subschema, Mapping)
            and is_truthy(subschema.get(KEY_REQUIRED))
        ]
    required = schema.get(KEY_REQUIRED)
    if not isinstance(required, (list, tuple)):
        return []
    return list(dict.fromkeys(required))


def match_property_schema(
    key: str,
    properties: Mapping[str, Any],
    pattern_properties: Mapping[str, Any],
) -> tuple[bool, Any]:
    """Find the subschema governing a property.

    An exact ``properties`` entry wins; otherwise the first
    ``patternProperties`` entry whose regex is found anywhere in the key
    (search, not full match), in schema order.

    Returns:
        Tuple of (matched, subschema).

    """
    if key in properties:
        return True, properties[key]
    for pattern, subschema in pattern_properties.items():
        compiled = _compile_pattern(pattern)
        if compiled is not None and compiled.search(key):
            return True, subschema
    return False, None


def validate_object(
    schema: Mapping[str, Any],
    data: Any,
    options: ValidationOptions,
    *,
    untyped: bool = False,
) -> SchemaError | None:
    """Validate a JSON object, reporting every property failure at once.

    Args:
        schema: Object schema.
        data: Value to validate.
        options: Options threaded through nested calls.
        untyped: The schema has no ``type``; keys it does not declare are
            accepted unless ``additionalProperties`` is given explicitly.

    Returns:
        wrong-type when data is not an object, a properties aggregate
        holding per-key errors and missing-property markers, or None.

    """
    # Import here to avoid circular dependency with the entry point
    from draftval.core.validator import validate  # noqa: PLC0415

    if not isinstance(data, Mapping):
        return SchemaError(ErrorKind.WRONG_TYPE, expected=EXPECTED_MAP, data=data)

    properties = _as_mapping(schema.get(KEY_PROPERTIES))
    pattern_properties = _as_mapping(schema.get(KEY_PATTERN_PROPERTIES))
    additional = schema.get(KEY_ADDITIONAL_PROPERTIES)
    additional_allowed = is_truthy(additional) or (untyped and additional is None)

    errors: dict[str, SchemaError] = {}
    for key, value in data.items():
        name = str(key)
        matched, subschema = match_property_schema(
            name, properties, pattern_properties
        )
        if matched:
            error = validate(subschema, value, options)
            if error is not None:
                errors[name] = error
        elif not additional_allowed:
            errors[name] = _ADDITIONAL_PROPERTY

    # Present keys are never missing, whatever else is wrong with them
    missing = [name for name in required_names(schema, options) if name not in data]

    if not errors and not missing:
        return None
    for name in missing:
        errors[name] = _MISSING_PROPERTY
    return SchemaError(ErrorKind.PROPERTIES, data=data, properties=errors)
