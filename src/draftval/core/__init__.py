"""Draft-4 JSON schema validation engine.

Entry point, type dispatcher, per-type checkers and reference resolution.
Everything here operates on already-parsed values and returns errors as
values.
"""

from draftval.core.options import ValidationOptions
from draftval.core.resolver import (
    FileRefResolver,
    RefResolver,
    RegistryRefResolver,
    resolve_ref,
)
from draftval.core.validator import validate

__all__ = [
    "FileRefResolver",
    "RefResolver",
    "RegistryRefResolver",
    "ValidationOptions",
    "resolve_ref",
    "validate",
]
