"""Schema reference ($ref) resolution.

A resolver is any callable ``(root, uri) -> (new_root, schema) | None``.
Fragment references (``#/definitions/x``) are looked up inside the current
root; anything else names an external document, which becomes the new
root for the references it contains. Resolvers never raise: a failed
resolution returns None and the entry point reports it as a validation
error.
"""

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TypeAlias

from draftval.constants import REF_FRAGMENT_PREFIX, REF_PATH_SEPARATOR
from draftval.documents import try_load_document
from draftval.logger import get_logger

logger = get_logger(__name__)

Resolution: TypeAlias = tuple[Any, Any]
RefResolver: TypeAlias = Callable[[Any, str], Resolution | None]

_NOT_FOUND = object()


def _unescape(segment: str) -> str:
    """Decode JSON-pointer escapes (~1 is '/', ~0 is '~')."""
    return segment.replace("~1", "/").replace("~0", "~")


def resolve_pointer(document: Any, pointer: str) -> Any:
    """Walk a '/'-delimited path of keys or list indexes into a document.

    Args:
        document: Document to walk.
        pointer: Path such as ``/definitions/address``; empty for the
            document itself.

    Returns:
        The value found, or None when any segment is missing.

    """
    pointer = pointer.removeprefix(REF_PATH_SEPARATOR)
    if not pointer:
        return document

    current = document
    for raw_segment in pointer.split(REF_PATH_SEPARATOR):
        segment = _unescape(raw_segment)
        if isinstance(current, Mapping):
            current = current.get(segment, _NOT_FOUND)
        elif isinstance(current, (list, tuple)) and segment.isdigit():
            index = int(segment)
            current = current[index] if index < len(current) else _NOT_FOUND
        else:
            current = _NOT_FOUND
        if current is _NOT_FOUND:
            return None
    return current


def split_ref(uri: str) -> tuple[str, str | None]:
    """Split a reference into document part and fragment.

    Returns:
        Tuple of (document, fragment); fragment is None when the reference
        has no '#'. A pure fragment reference has an empty document part.

    """
    document, sep, fragment = uri.partition(REF_FRAGMENT_PREFIX)
    return document, (fragment if sep else None)


def _resolve_in(document: Any, fragment: str | None) -> Resolution | None:
    schema = resolve_pointer(document, fragment or "")
    if schema is None:
        return None
    return document, schema


class FileRefResolver:
    """Resolve fragments in the current root and other references as files.

    Relative file paths are resolved against ``base_dir`` (current
    directory when unset). Every external reference re-reads its file.
    """

    def __init__(self, base_dir: Path | str | None = None) -> None:
        """Initialize the resolver.

        Args:
            base_dir: Directory for relative document paths.

        """
        self.base_dir = Path(base_dir) if base_dir else None

    def __call__(self, root: Any, uri: str) -> Resolution | None:
        """Resolve ``uri`` against ``root``."""
        document_ref, fragment = split_ref(uri)
        if not document_ref:
            return _resolve_in(root, fragment)

        path = Path(document_ref)
        if self.base_dir is not None:
            path = self.base_dir / path
        document = try_load_document(path)
        if document is None:
            logger.debug("Referenced document unavailable: %s", path)
            return None
        logger.debug("Loaded referenced document: %s", path)
        return _resolve_in(document, fragment)

    def __repr__(self) -> str:
        return f"FileRefResolver(base_dir={self.base_dir!r})"


class RegistryRefResolver:
    """Resolve external references from an in-memory document registry.

    Example:
        >>> resolver = RegistryRefResolver({"address.json": address_schema})
        >>> options = ValidationOptions(ref_resolver=resolver, root=schema)

    """

    def __init__(self, documents: Mapping[str, Any]) -> None:
        """Initialize the resolver with documents keyed by reference URI."""
        self.documents = dict(documents)

    def __call__(self, root: Any, uri: str) -> Resolution | None:
        """Resolve ``uri`` against ``root`` or a registered document."""
        document_ref, fragment = split_ref(uri)
        if not document_ref:
            return _resolve_in(root, fragment)
        document = self.documents.get(document_ref)
        if document is None:
            logger.debug("Reference not registered: %s", document_ref)
            return None
        return _resolve_in(document, fragment)


def resolve_ref(root: Any, uri: str) -> Resolution | None:
    """Resolve a reference with the default file-based behavior."""
    return FileRefResolver()(root, uri)
