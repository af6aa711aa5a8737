"""Centralized constants module for draftval.

This module serves as the single source of truth for shared constants:
schema keywords, type names, settings keys and logging formats. Constants
are organized by logical categories and use typing.Final annotations.

Usage:
    from draftval.constants import KEY_REF
"""

from typing import Final

# =============================================================================
# Schema keywords (draft 4)
# =============================================================================

KEY_REF: Final[str] = "$ref"
KEY_TYPE: Final[str] = "type"
KEY_ENUM: Final[str] = "enum"
KEY_FORMAT: Final[str] = "format"

KEY_PROPERTIES: Final[str] = "properties"
KEY_PATTERN_PROPERTIES: Final[str] = "patternProperties"
KEY_ADDITIONAL_PROPERTIES: Final[str] = "additionalProperties"
KEY_REQUIRED: Final[str] = "required"

KEY_ITEMS: Final[str] = "items"
KEY_MIN_ITEMS: Final[str] = "minItems"
KEY_MAX_ITEMS: Final[str] = "maxItems"
KEY_UNIQUE_ITEMS: Final[str] = "uniqueItems"

KEY_MINIMUM: Final[str] = "minimum"
KEY_MAXIMUM: Final[str] = "maximum"
KEY_EXCLUSIVE_MINIMUM: Final[str] = "exclusiveMinimum"
KEY_EXCLUSIVE_MAXIMUM: Final[str] = "exclusiveMaximum"

# Scalar type names reported in wrong-type errors
TYPE_STRING: Final[str] = "string"
TYPE_NUMBER: Final[str] = "number"
TYPE_INTEGER: Final[str] = "integer"
TYPE_BOOLEAN: Final[str] = "boolean"

FORMAT_DATE_TIME: Final[str] = "date-time"

# Shape names reported in wrong-type errors for containers
EXPECTED_MAP: Final[str] = "map"
EXPECTED_ARRAY_LIKE: Final[str] = "array-like"

# Reference syntax
REF_FRAGMENT_PREFIX: Final[str] = "#"
REF_PATH_SEPARATOR: Final[str] = "/"

# =============================================================================
# Configuration Constants
# =============================================================================

SETTINGS_VERSION: Final[str] = "1.0.0"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "draftval"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_DRAFT3_REQUIRED: Final[bool] = False
DEFAULT_FILE_LOGGING: Final[bool] = False

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_RESOLVER: Final[str] = "resolver"
SECTION_LOGGING: Final[str] = "logging"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_DRAFT3_REQUIRED: Final[str] = "draft3_required"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_BASE_DIR: Final[str] = "base_dir"
KEY_FILE_LOGGING: Final[str] = "file_logging"

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

# Environment overrides
ENV_CONFIG_DIR: Final[str] = "DRAFTVAL_CONFIG_DIR"
ENV_LOG_DIR: Final[str] = "DRAFTVAL_LOG_DIR"
ENV_LOG_LEVEL: Final[str] = "LOG_LEVEL"

# =============================================================================
# Logging Constants
# =============================================================================

LOG_FILE_NAME: Final[str] = "draftval.log"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# CLI Constants
# =============================================================================

EXIT_OK: Final[int] = 0
EXIT_INVALID: Final[int] = 1
EXIT_ERROR: Final[int] = 2

OUTPUT_TEXT: Final[str] = "text"
OUTPUT_JSON: Final[str] = "json"
