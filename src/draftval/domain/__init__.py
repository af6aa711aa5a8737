"""Domain types for the validation engine.

Pure data types without IO or infrastructure dependencies.
"""

from draftval.domain.errors import ErrorKind, SchemaError

__all__ = ["ErrorKind", "SchemaError"]
