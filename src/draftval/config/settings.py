"""Settings manager for the INI settings file."""

import configparser
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypedDict

from draftval.config.paths import Paths
from draftval.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_DRAFT3_REQUIRED,
    DEFAULT_FILE_LOGGING,
    DEFAULT_LOG_LEVEL,
    KEY_BASE_DIR,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_DRAFT3_REQUIRED,
    KEY_FILE_LOGGING,
    KEY_LOG_LEVEL,
    SECTION_DEFAULT,
    SECTION_LOGGING,
    SECTION_RESOLVER,
    SETTINGS_VERSION,
    VALID_LOG_LEVELS,
)
from draftval.exceptions import ConfigurationError

if TYPE_CHECKING:
    from draftval.core.options import ValidationOptions

logger = logging.getLogger(__name__)

# Type alias for raw INI config dictionary
RawConfigDict = dict[str, str | dict[str, str]]

_BOOLEAN_STATES = configparser.ConfigParser.BOOLEAN_STATES

_KEY_COMMENTS: dict[str, str] = {
    KEY_DRAFT3_REQUIRED: "# true: per-property 'required' flags (draft 3)",
    KEY_LOG_LEVEL: "# File log level: DEBUG, INFO, WARNING, ERROR",
    KEY_CONSOLE_LOG_LEVEL: "# Console log level",
    KEY_BASE_DIR: "# Directory for relative $ref file paths (empty: cwd)",
    KEY_FILE_LOGGING: "# Write logs to the logs/ directory",
}


class Settings(TypedDict):
    """Effective draftval settings."""

    config_version: str
    draft3_required: bool
    log_level: str
    console_log_level: str
    base_dir: Path | None
    file_logging: bool


class SettingsManager:
    """Manages the INI settings file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.get_config_dir())

        """
        self.config_dir = config_dir or Paths.get_config_dir()
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_settings(self) -> RawConfigDict:
        """Get default settings as raw INI values.

        Returns:
            Default configuration dictionary

        """
        return {
            KEY_CONFIG_VERSION: SETTINGS_VERSION,
            KEY_DRAFT3_REQUIRED: str(DEFAULT_DRAFT3_REQUIRED).lower(),
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_RESOLVER: {KEY_BASE_DIR: ""},
            SECTION_LOGGING: {
                KEY_FILE_LOGGING: str(DEFAULT_FILE_LOGGING).lower()
            },
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser from defaults dictionary.

        Args:
            defaults: Default configuration values

        Returns:
            ConfigParser populated with defaults

        """
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))

        return config

    def load_default_settings(self) -> Settings:
        """Return the built-in defaults as typed settings."""
        return self._convert_to_settings(
            self._create_config_from_defaults(self.get_default_settings())
        )

    def load_settings(self) -> Settings:
        """Load settings, layering the user's file over the defaults.

        A missing settings file is not an error; defaults apply.

        Returns:
            Effective settings

        Raises:
            ConfigurationError: If the file cannot be parsed or holds
                invalid values

        """
        config = self._create_config_from_defaults(self.get_default_settings())
        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                msg = f"Cannot parse settings file: {e}"
                raise ConfigurationError(msg, target=str(self.settings_file)) from e
            logger.debug("Loaded settings from %s", self.settings_file)
        else:
            logger.debug("No settings file at %s, using defaults", self.settings_file)

        return self._convert_to_settings(config)

    def _convert_to_settings(self, config: configparser.ConfigParser) -> Settings:
        """Convert a ConfigParser into typed, validated settings."""
        defaults = config.defaults()

        base_dir_raw = config.get(SECTION_RESOLVER, KEY_BASE_DIR, fallback="")
        base_dir = Paths.expand_path(base_dir_raw) if base_dir_raw.strip() else None

        return Settings(
            config_version=defaults.get(KEY_CONFIG_VERSION, SETTINGS_VERSION),
            draft3_required=self._parse_bool(
                KEY_DRAFT3_REQUIRED, defaults.get(KEY_DRAFT3_REQUIRED, "false")
            ),
            log_level=self._parse_level(
                KEY_LOG_LEVEL, defaults.get(KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL)
            ),
            console_log_level=self._parse_level(
                KEY_CONSOLE_LOG_LEVEL,
                defaults.get(KEY_CONSOLE_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL),
            ),
            base_dir=base_dir,
            file_logging=self._parse_bool(
                KEY_FILE_LOGGING,
                config.get(SECTION_LOGGING, KEY_FILE_LOGGING, fallback="false"),
            ),
        )

    def _parse_bool(self, key: str, value: str) -> bool:
        normalized = value.strip().lower()
        if normalized not in _BOOLEAN_STATES:
            msg = f"'{key}' must be a boolean, got '{value}'"
            raise ConfigurationError(msg, target=str(self.settings_file))
        return _BOOLEAN_STATES[normalized]

    def _parse_level(self, key: str, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in VALID_LOG_LEVELS:
            msg = (
                f"'{key}' must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got '{value}'"
            )
            raise ConfigurationError(msg, target=str(self.settings_file))
        return normalized

    def save_settings(self, settings: Settings) -> None:
        """Save settings to the INI file with explanatory comments.

        Args:
            settings: Settings to save

        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        sections: dict[str, dict[str, str]] = {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: settings["config_version"],
                KEY_DRAFT3_REQUIRED: str(settings["draft3_required"]).lower(),
                KEY_LOG_LEVEL: settings["log_level"],
                KEY_CONSOLE_LOG_LEVEL: settings["console_log_level"],
            },
            SECTION_RESOLVER: {
                KEY_BASE_DIR: str(settings["base_dir"] or ""),
            },
            SECTION_LOGGING: {
                KEY_FILE_LOGGING: str(settings["file_logging"]).lower(),
            },
        }

        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write("# draftval settings\n")
            for section, values in sections.items():
                f.write(f"\n[{section}]\n")
                for key, value in values.items():
                    inline_comment = _KEY_COMMENTS.get(key, "")
                    if inline_comment:
                        f.write(f"{key} = {value}  {inline_comment}\n")
                    else:
                        f.write(f"{key} = {value}\n")
        logger.info("Settings saved to %s", self.settings_file)

    def build_options(
        self,
        schema: Any,
        settings: Settings | None = None,
        *,
        draft3_required: bool | None = None,
        base_dir: Path | None = None,
    ) -> "ValidationOptions":
        """Build validation options rooted at ``schema``.

        Explicit arguments (from the CLI) take precedence over settings.

        Args:
            schema: Root schema document
            settings: Loaded settings (loaded on demand when omitted)
            draft3_required: Override for the draft-3 required mode
            base_dir: Override for the $ref base directory

        Returns:
            Validation options for draftval.validate()

        """
        # Import here to avoid circular dependency with the logger package
        from draftval.core.options import ValidationOptions  # noqa: PLC0415
        from draftval.core.resolver import FileRefResolver  # noqa: PLC0415

        if settings is None:
            settings = self.load_settings()
        if draft3_required is None:
            draft3_required = settings["draft3_required"]
        return ValidationOptions(
            ref_resolver=FileRefResolver(base_dir or settings["base_dir"]),
            root=schema,
            draft3_required=draft3_required,
        )
