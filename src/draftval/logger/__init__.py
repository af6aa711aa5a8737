"""Logging utilities for draftval.

This package provides structured logging with:
- Colored console output on stderr (bare messages for INFO)
- Optional file rotation using RotatingFileHandler
- Non-blocking logging via QueueHandler/QueueListener
- Thread-safe singleton initialization of the "draftval" root logger
- Hierarchical logger naming (e.g., draftval.core.resolver)

Usage:
    >>> from draftval.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Resolving %s", uri)  # Use %-style formatting

Environment Variables:
    LOG_LEVEL: Override console log level
    DRAFTVAL_LOG_DIR: Enable file logging into this directory

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls; use %-formatting
"""

from draftval.logger.config import (
    update_logger_from_config as _update_config,
)
from draftval.logger.formatters import ConsoleFormatter
from draftval.logger.logger import (
    clear_logger_state,
    enable_file_logging,
    flush_all_handlers,
    get_logger,
    set_console_level,
    setup_logging,
)
from draftval.logger.state import get_state

__all__ = [
    "ConsoleFormatter",
    "clear_logger_state",
    "enable_file_logging",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "set_console_level",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config() -> None:
    """Update logger handler levels from the settings file.

    Convenience wrapper passing the global state singleton to the
    internal implementation.
    """
    _update_config(get_state())
