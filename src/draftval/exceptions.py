"""Exception classes for draftval's outer layers.

The validation engine never raises for invalid data; it returns
SchemaError values. These exceptions cover document loading,
metaschema checks and configuration.
"""


class DraftvalError(Exception):
    """Base exception for draftval operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the document or setting that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class DocumentLoadError(DraftvalError):
    """Raised when a schema or data document cannot be read or parsed."""

    error_prefix = "Loading failed"


class SchemaDefinitionError(DraftvalError):
    """Raised when a schema document is not a valid draft-4 schema."""

    error_prefix = "Invalid schema"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        path: str | None = None,
    ) -> None:
        """Initialize error with the JSON path of the offending keyword.

        Args:
            message: Error message describing the failure.
            target: Optional schema file name.
            path: Dotted path inside the schema, if known.

        """
        super().__init__(message, target)
        self.path = path


class ConfigurationError(DraftvalError):
    """Raised for invalid settings or logging setup failures."""

    error_prefix = "Configuration error"
