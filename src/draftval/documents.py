"""JSON document loading for schemas and data.

The validation core consumes parsed values only; this module is the
collaborator that turns files into those values.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import orjson

from draftval.exceptions import DocumentLoadError
from draftval.logger import get_logger

logger = get_logger(__name__)


def load_document(path: str | Path, label: str = "JSON") -> Any:
    """Read and parse a JSON document.

    Args:
        path: File to read.
        label: Document role used in error messages ("schema", "data").

    Returns:
        The parsed JSON value.

    Raises:
        DocumentLoadError: If the file is missing, unreadable or not JSON.

    """
    file_path = Path(path)
    try:
        with file_path.open("rb") as f:
            raw = f.read()
    except FileNotFoundError as e:
        msg = f"{label} file not found: {file_path}"
        raise DocumentLoadError(msg, target=str(file_path)) from e
    except OSError as e:
        msg = f"Unable to read {label} file: {e}"
        raise DocumentLoadError(msg, target=str(file_path)) from e

    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        msg = f"{label} file is not valid JSON: {e}"
        raise DocumentLoadError(msg, target=str(file_path)) from e


def try_load_document(path: str | Path) -> Any | None:
    """Load a JSON document, returning None instead of raising.

    Used by the file reference resolver, where a failed load must become a
    validation error rather than an exception.
    """
    try:
        return load_document(path, "referenced schema")
    except DocumentLoadError as e:
        logger.debug("Could not load referenced document: %s", e)
        return None


def dump_document(value: Any, indent: bool = True) -> str:  # noqa: FBT001, FBT002
    """Render a JSON value as text, indented unless ``indent`` is False."""
    option = orjson.OPT_NON_STR_KEYS
    if indent:
        option |= orjson.OPT_INDENT_2
    return orjson.dumps(
        value,
        option=option,
        default=_fallback,
    ).decode("utf-8")


def _fallback(value: Any) -> Any:
    """Serialize values orjson does not know (sets, non-dict mappings)."""
    if isinstance(value, (set, frozenset)):
        return list(value)
    if isinstance(value, Mapping):
        return dict(value)
    return repr(value)
