"""Structured validation error model.

Validation failures are values, not exceptions. Each SchemaError carries
an ErrorKind discriminant plus the context fields relevant to that kind.
Container validators build aggregate errors whose ``properties`` or
``items`` mappings hold the child errors, so one validation call reports
every independent failure.
"""

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Validation error kinds."""

    WRONG_TYPE = "wrong-type"
    WRONG_FORMAT = "wrong-format"
    OUT_OF_BOUNDS = "out-of-bounds"
    INVALID_ENUM_VALUE = "invalid-enum-value"
    WRONG_NUMBER_OF_ELEMENTS = "wrong-number-of-elements"
    DUPLICATE_ITEMS_NOT_ALLOWED = "duplicate-items-not-allowed"
    ARRAY_ITEMS = "array-items"
    ADDITIONAL_PROPERTY = "additional-property"
    MISSING_PROPERTY = "missing-property"
    PROPERTIES = "properties"
    UNABLE_TO_RESOLVE_REFERENCED_SCHEMA = "unable-to-resolve-referenced-schema"
    CIRCULAR_REFERENCE = "circular-reference"

    @property
    def is_aggregate(self) -> bool:
        """Check if errors of this kind carry child errors."""
        return self in (ErrorKind.PROPERTIES, ErrorKind.ARRAY_ITEMS)


# Marker for "field not set"; ``data`` may legitimately be None (JSON null)
_UNSET: Any = type("_Unset", (), {"__repr__": lambda self: "<unset>"})()

# Fields whose None value is meaningful data rather than "not set"
_NULLABLE_FIELDS = frozenset({"data", "schema_root"})


@dataclass(frozen=True)
class SchemaError:
    """A single validation failure, possibly aggregating child failures.

    Attributes:
        kind: What went wrong.
        data: The offending data value (unset for markers such as
            missing-property, which have no data).
        expected: Expected shape or format name (wrong-type, wrong-format).
        minimum: Lower bound (out-of-bounds, wrong-number-of-elements).
        maximum: Upper bound (out-of-bounds, wrong-number-of-elements).
        exclusive: Whether the violated numeric bound was exclusive.
        actual: Actual element count (wrong-number-of-elements).
        allowed_values: Members of the violated enum.
        properties: Child errors keyed by property name (properties).
        items: Child errors keyed by element index (array-items).
        position: Index of this error's element inside its parent array.
        schema_root: Resolution root a failed $ref was resolved against.
        schema_uri: The $ref that failed to resolve.

    """

    kind: ErrorKind
    data: Any = _UNSET
    expected: str | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    exclusive: bool | None = None
    actual: int | None = None
    allowed_values: tuple[Any, ...] | None = None
    properties: dict[str, "SchemaError"] | None = None
    items: dict[int, "SchemaError"] | None = None
    position: int | None = None
    schema_root: Any = _UNSET
    schema_uri: str | None = None

    @property
    def has_data(self) -> bool:
        """Check if the error records the offending data value."""
        return self.data is not _UNSET

    def at_position(self, position: int) -> "SchemaError":
        """Return a copy of this error tagged with an array position."""
        return replace(self, position=position)

    def to_dict(self) -> dict[str, Any]:
        """Render the error tree as plain JSON-ready data.

        The kind is rendered as its hyphenated string; fields that were not
        set are omitted; array item keys keep their integer indexes as
        strings so the result is a valid JSON object.

        Returns:
            Nested dictionary describing the error.

        """
        result: dict[str, Any] = {"error": self.kind.value}
        for field in fields(self):
            if field.name == "kind":
                continue
            value = getattr(self, field.name)
            if value is _UNSET:
                continue
            if value is None and field.name not in _NULLABLE_FIELDS:
                continue
            if field.name == "properties":
                value = {name: child.to_dict() for name, child in value.items()}
            elif field.name == "items":
                value = {str(idx): child.to_dict() for idx, child in value.items()}
            elif field.name == "allowed_values":
                value = list(value)
            result[field.name.replace("_", "-")] = value
        return result

    def iter_leaves(self, path: str = "$"):
        """Yield ``(path, error)`` for every non-aggregate error in the tree.

        Args:
            path: Path prefix for this node.

        Yields:
            Tuples of a ``$``-rooted path and the leaf error found there.

        """
        if self.kind is ErrorKind.PROPERTIES and self.properties:
            for name, child in self.properties.items():
                yield from child.iter_leaves(f"{path}.{name}")
        elif self.kind is ErrorKind.ARRAY_ITEMS and self.items:
            for idx, child in self.items.items():
                yield from child.iter_leaves(f"{path}[{idx}]")
        else:
            yield path, self
