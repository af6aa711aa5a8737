"""Top-level package for draftval, a JSON schema draft-4 validator.

Usage:
    >>> from draftval import validate
    >>> error = validate(schema, data)
    >>> if error is not None:
    ...     print(error.to_dict())
"""

from importlib.metadata import PackageNotFoundError, version

from draftval.core import (
    FileRefResolver,
    RegistryRefResolver,
    ValidationOptions,
    resolve_ref,
    validate,
)
from draftval.domain.errors import ErrorKind, SchemaError

try:
    __version__ = version("draftval")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"

__all__ = [
    "ErrorKind",
    "FileRefResolver",
    "RegistryRefResolver",
    "SchemaError",
    "ValidationOptions",
    "__version__",
    "resolve_ref",
    "validate",
]
