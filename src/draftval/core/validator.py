"""Validation entry point.

Usage:
    >>> from draftval import validate
    >>> validate({"type": "integer", "minimum": 1}, 0)
    SchemaError(kind=<ErrorKind.OUT_OF_BOUNDS: 'out-of-bounds'>, ...)
    >>> validate({"type": "integer"}, 3) is None
    True

A schema node is either a ``$ref`` (pure indirection, sibling keywords
ignored) or a constraint node, checked for ``enum`` membership first and
then by type.
"""

from collections.abc import Hashable, Mapping
from typing import Any

from draftval.constants import KEY_REF
from draftval.core.dispatch import validate_by_type
from draftval.core.enumeration import validate_enum_value
from draftval.core.options import ValidationOptions
from draftval.core.resolver import split_ref
from draftval.domain.errors import ErrorKind, SchemaError
from draftval.logger import get_logger

logger = get_logger(__name__)


def _reference_key(root: Any, uri: str) -> Hashable:
    """Identify the schema a reference points at, for cycle detection.

    External documents are re-read on every hop, so they are identified by
    URI; fragments are identified by the root they resolve against.
    """
    document_ref, fragment = split_ref(uri)
    if document_ref:
        return ("document", document_ref, fragment)
    return ("fragment", id(root), fragment)


def _follow_refs(
    schema: Any, options: ValidationOptions
) -> tuple[Any, ValidationOptions, SchemaError | None]:
    """Follow a chain of ``$ref`` nodes to a constraint node.

    Returns:
        Tuple of (schema, options, error). On success the error is None and
        options carry the root of the final resolved schema.

    """
    visited: set[Hashable] = set()
    # Roots stay referenced so their ids are not reused within one chain
    roots: list[Any] = [options.root]
    while isinstance(schema, Mapping) and KEY_REF in schema:
        uri = schema[KEY_REF]
        if not isinstance(uri, str):
            return schema, options, SchemaError(
                ErrorKind.UNABLE_TO_RESOLVE_REFERENCED_SCHEMA,
                schema_root=options.root,
                schema_uri=repr(uri),
            )

        key = _reference_key(options.root, uri)
        if key in visited:
            logger.debug("Circular $ref detected: %s", uri)
            return schema, options, SchemaError(
                ErrorKind.CIRCULAR_REFERENCE,
                schema_root=options.root,
                schema_uri=uri,
            )
        visited.add(key)

        resolution = options.ref_resolver(options.root, uri)
        if resolution is None or resolution[1] is None:
            logger.debug("Unable to resolve $ref: %s", uri)
            return schema, options, SchemaError(
                ErrorKind.UNABLE_TO_RESOLVE_REFERENCED_SCHEMA,
                schema_root=options.root,
                schema_uri=uri,
            )
        root, schema = resolution
        roots.append(root)
        options = options.with_root(root)
    return schema, options, None


def validate(
    schema: Any, data: Any, options: ValidationOptions | None = None
) -> SchemaError | None:
    """Validate data against a draft-4 schema.

    Args:
        schema: Parsed schema document or subschema.
        data: Parsed data value.
        options: Resolver, resolution root and draft-3 switch. Defaults to
            file-based resolution rooted at ``schema``; an options value
            without a root is rooted at ``schema`` too.

    Returns:
        None when data is valid, otherwise a SchemaError tree describing
        every failure found.

    """
    if options is None:
        options = ValidationOptions(root=schema)
    elif options.root is None:
        options = options.with_root(schema)

    schema, options, ref_error = _follow_refs(schema, options)
    if ref_error is not None:
        return ref_error

    enum_error = validate_enum_value(schema, data)
    if enum_error is not None:
        return enum_error
    return validate_by_type(schema, data, options)
