"""Configuration loading and updating for the logging system.

Bootstrap settings come from constants and environment variables; the
settings file is applied later through update_logger_from_config(), using
a late import to avoid a circular dependency with draftval.config.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from draftval.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    LOG_FILE_NAME,
    VALID_LOG_LEVELS,
)

if TYPE_CHECKING:
    from draftval.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str, Path | None]:
    """Load bootstrap console level, file level and log file path.

    Environment Variable Override:
        DRAFTVAL_LOG_DIR: Enables file logging to
            $DRAFTVAL_LOG_DIR/draftval.log. Used by the test suite to keep
            test logs in a temporary directory.
        LOG_LEVEL: Overrides the console level (DEBUG, INFO, WARNING,
            ERROR, CRITICAL); invalid values are ignored.

    Returns:
        Tuple of (console_level, file_level, log_path); log_path is None
        when file logging is not requested by the environment.

    """
    console_level = DEFAULT_CONSOLE_LOG_LEVEL
    env_level = os.getenv(ENV_LOG_LEVEL, "").strip().upper()
    if env_level in VALID_LOG_LEVELS:
        console_level = env_level

    log_path = None
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME

    return console_level, DEFAULT_LOG_LEVEL, log_path


def update_logger_from_config(state: "_LoggerState") -> None:
    """Update handler levels and file logging from the settings file.

    Only handler levels change, plus a file handler when the settings turn
    file logging on. Errors while loading settings are ignored so a broken
    settings file never prevents logging from working.

    Args:
        state: Logger state object (from logger.state module)

    """
    try:
        # Import here to avoid circular dependency
        from draftval.config import SettingsManager  # noqa: PLC0415
        from draftval.exceptions import ConfigurationError  # noqa: PLC0415
        from draftval.logger.logger import enable_file_logging  # noqa: PLC0415

        try:
            settings = SettingsManager().load_settings()
        except ConfigurationError:
            return

        console_level = getattr(
            logging, settings["console_log_level"], logging.WARNING
        )
        file_level = getattr(logging, settings["log_level"], logging.INFO)

        if state.queue_listener is not None:
            for handler in state.queue_listener.handlers:
                if isinstance(handler, RotatingFileHandler):
                    handler.setLevel(file_level)
                elif isinstance(handler, logging.StreamHandler):
                    handler.setLevel(console_level)

        if settings["file_logging"] and state.log_file is None:
            enable_file_logging(file_level=settings["log_level"])

        state.config_applied = True

    except (ImportError, KeyError, AttributeError):
        # Config module not fully initialized yet; keep bootstrap defaults
        pass
