"""Options threaded through every recursive validation call."""

from dataclasses import dataclass, field, replace
from typing import Any

from draftval.core.resolver import FileRefResolver, RefResolver


@dataclass(frozen=True)
class ValidationOptions:
    """Immutable validation configuration.

    Attributes:
        ref_resolver: Callable resolving ``$ref`` URIs against a root.
        root: Document that fragment references resolve against; None
            means "the schema passed to validate()".
        draft3_required: Read ``required`` as a per-property flag
            (draft 3) instead of a list on the object schema (draft 4).

    """

    ref_resolver: RefResolver = field(default_factory=FileRefResolver)
    root: Any = None
    draft3_required: bool = False

    def with_root(self, root: Any) -> "ValidationOptions":
        """Return a copy with the resolution root replaced."""
        return replace(self, root=root)
