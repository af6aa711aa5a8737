"""Formatting of validation results for terminal output."""

from typing import Any

from draftval.documents import dump_document
from draftval.domain.errors import ErrorKind, SchemaError


def _short(value: Any, max_length: int = 60) -> str:
    """Render a data value compactly, truncating long renderings."""
    text = dump_document(value, indent=False)
    if len(text) > max_length:
        return text[: max_length - 3] + "..."
    return text


def describe_error(error: SchemaError) -> str:
    """Describe a single (leaf) error in one line.

    Args:
        error: Leaf error from SchemaError.iter_leaves().

    Returns:
        Human-readable description.

    """
    match error.kind:
        case ErrorKind.WRONG_TYPE:
            return f"expected {error.expected}, got {_short(error.data)}"
        case ErrorKind.WRONG_FORMAT:
            return f"{_short(error.data)} is not a valid {error.expected}"
        case ErrorKind.OUT_OF_BOUNDS:
            if error.minimum is not None:
                op = ">" if error.exclusive else ">="
                return f"{_short(error.data)} must be {op} {error.minimum}"
            op = "<" if error.exclusive else "<="
            return f"{_short(error.data)} must be {op} {error.maximum}"
        case ErrorKind.INVALID_ENUM_VALUE:
            allowed = ", ".join(_short(v, 20) for v in error.allowed_values or ())
            return f"{_short(error.data)} is not one of [{allowed}]"
        case ErrorKind.WRONG_NUMBER_OF_ELEMENTS:
            if error.minimum is not None:
                return f"expected at least {error.minimum} items, got {error.actual}"
            return f"expected at most {error.maximum} items, got {error.actual}"
        case ErrorKind.DUPLICATE_ITEMS_NOT_ALLOWED:
            return "array items must be unique"
        case ErrorKind.ADDITIONAL_PROPERTY:
            return "property is not allowed"
        case ErrorKind.MISSING_PROPERTY:
            return "required property is missing"
        case ErrorKind.UNABLE_TO_RESOLVE_REFERENCED_SCHEMA:
            return f"unable to resolve $ref '{error.schema_uri}'"
        case ErrorKind.CIRCULAR_REFERENCE:
            return f"circular $ref '{error.schema_uri}'"
        case _:
            return error.kind.value


def format_error_tree(error: SchemaError) -> list[str]:
    """Format every leaf of an error tree as ``path: description`` lines.

    Example:
        >>> format_error_tree(error)
        ['$.address.city: required property is missing',
         '$.phoneNumber[1].code: expected string, got 42']

    """
    return [
        f"{path}: {describe_error(leaf)}" for path, leaf in error.iter_leaves()
    ]
