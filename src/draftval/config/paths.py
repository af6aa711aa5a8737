"""Path constants and utilities for draftval configuration.

Centralizes path management so the settings manager, the logger and the
CLI agree on where things live. ``DRAFTVAL_CONFIG_DIR`` relocates the whole
configuration directory (used by the test suite).
"""

import os
from pathlib import Path

from draftval.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    ENV_CONFIG_DIR,
    LOG_FILE_NAME,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    DEFAULT_CONFIG_DIR = HOME_DIR / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR

    @classmethod
    def get_config_dir(cls) -> Path:
        """Get the configuration directory, honouring DRAFTVAL_CONFIG_DIR.

        Returns:
            Configuration directory path
        """
        override = os.environ.get(ENV_CONFIG_DIR)
        if override:
            return cls.expand_path(override)
        return cls.DEFAULT_CONFIG_DIR

    @classmethod
    def get_settings_file(cls) -> Path:
        """Get path to the INI settings file."""
        return cls.get_config_dir() / CONFIG_FILE_NAME

    @classmethod
    def get_logs_dir(cls) -> Path:
        """Get the log directory."""
        return cls.get_config_dir() / "logs"

    @classmethod
    def get_log_file(cls) -> Path:
        """Get the default log file path."""
        return cls.get_logs_dir() / LOG_FILE_NAME

    @classmethod
    def expand_path(cls, path_str: str | Path) -> Path:
        """Expand and resolve path with ~ and relative path support.

        Args:
            path_str: Path string to expand (e.g., "~/schemas" or "./rel")

        Returns:
            Expanded and resolved Path object

        Example:
            >>> Paths.expand_path("~/schemas")
            Path('/home/user/schemas')
        """
        return Path(path_str).expanduser().resolve(strict=False)
