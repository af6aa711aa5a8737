"""Draft-4 metaschema check for schema documents.

The engine in draftval.core assumes a well-formed schema. This module
checks a schema document against the official draft-4 metaschema using
jsonschema, so malformed schemas are reported before any data is
validated against them.
"""

from typing import Any

from jsonschema import Draft4Validator, ValidationError
from jsonschema.exceptions import best_match

from draftval.exceptions import SchemaDefinitionError
from draftval.logger import get_logger

logger = get_logger(__name__)

_metaschema_validator = Draft4Validator(Draft4Validator.META_SCHEMA)


def _format_metaschema_error(error: ValidationError) -> str:
    """Format a metaschema violation into a user-friendly message.

    Args:
        error: Validation error from jsonschema

    Returns:
        Formatted error message

    """
    path = (
        ".".join(str(p) for p in error.absolute_path)
        if error.absolute_path
        else "root"
    )

    message = error.message
    if error.validator == "type":
        expected_type = error.validator_value
        actual = type(error.instance).__name__
        message = f"Expected type '{expected_type}', got '{actual}'"
    elif error.validator == "enum":
        message = f"Invalid value. {error.message}"
    elif error.validator == "minItems":
        message = f"Too few entries: {error.message}"

    return f"{message} (at '{path}')"


def check_schema(schema: Any, name: str | None = None) -> None:
    """Check a schema document against the draft-4 metaschema.

    Args:
        schema: Parsed schema document
        name: Optional schema name (file path) for error messages

    Raises:
        SchemaDefinitionError: If the schema is not a valid draft-4 schema

    """
    errors = list(_metaschema_validator.iter_errors(schema))
    if errors:
        best_error = best_match(errors)
        path = (
            ".".join(str(p) for p in best_error.absolute_path)
            if best_error.absolute_path
            else None
        )
        raise SchemaDefinitionError(
            _format_metaschema_error(best_error), target=name, path=path
        )

    logger.debug("Metaschema check passed: %s", name or "schema")
