"""JSON value model shared by schemas and data.

Values are plain Python objects as produced by a JSON decoder. This module
names their shapes and supplies a canonical equality key, because Python's
own equality treats ``True == 1`` while JSON does not.
"""

from collections.abc import Hashable, Mapping
from typing import Any, TypeAlias

JsonValue: TypeAlias = (
    None | bool | int | float | str | list[Any] | tuple[Any, ...] | Mapping[str, Any]
)


def is_object(value: Any) -> bool:
    """Check if value is a JSON object."""
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    """Check if value is array-like (list or tuple)."""
    return isinstance(value, (list, tuple))


def is_number(value: Any) -> bool:
    """Check if value is numeric (booleans excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    """Check if value has an integer representation.

    Draft 4 semantics: ``5.0`` is a number but not an integer.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    """Check if value is exactly ``True`` or ``False``."""
    return isinstance(value, bool)


def canonical_key(value: Any) -> Hashable:
    """Build a hashable key implementing JSON value equality.

    Booleans and numbers get distinct tags so ``True`` and ``1`` never
    collide, ``1`` and ``1.0`` compare equal, object key order is
    irrelevant and arrays compare element by element.

    Args:
        value: Any JSON value.

    Returns:
        Hashable key; two values are JSON-equal iff their keys are equal.

    """
    if value is None:
        return ("null",)
    if isinstance(value, bool):
        return ("boolean", value)
    if isinstance(value, (int, float)):
        return ("number", value)
    if isinstance(value, str):
        return ("string", value)
    if isinstance(value, Mapping):
        return (
            "object",
            frozenset((key, canonical_key(item)) for key, item in value.items()),
        )
    if isinstance(value, (list, tuple)):
        return ("array", tuple(canonical_key(item) for item in value))
    # Not a JSON value; fall back to identity-free repr equality
    return ("other", repr(value))


def count_distinct(values: list[Any] | tuple[Any, ...]) -> int:
    """Count distinct elements by JSON value equality."""
    return len({canonical_key(value) for value in values})


def contains_value(candidates: Any, value: Any) -> bool:
    """Check if value equals any member of candidates by JSON equality."""
    key = canonical_key(value)
    return any(canonical_key(candidate) == key for candidate in candidates)


def is_truthy(value: Any) -> bool:
    """Check if a schema flag is set.

    Only ``None`` (absent) and ``False`` are unset; any other value, an
    empty schema object included, counts as set.
    """
    return value is not None and value is not False
