"""CLI runner for draftval.

Orchestrates the execution of CLI commands by routing parsed
arguments to the appropriate command handlers.
"""

from argparse import Namespace
from collections.abc import Sequence

from draftval import __version__
from draftval.cli.commands import (
    BaseCommandHandler,
    CheckSchemaHandler,
    ConfigHandler,
    ValidateHandler,
)
from draftval.cli.parser import CLIParser
from draftval.config import SettingsManager
from draftval.constants import EXIT_ERROR, EXIT_OK
from draftval.exceptions import DraftvalError
from draftval.logger import get_logger, set_console_level, update_logger_from_config

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, settings_manager: SettingsManager | None = None) -> None:
        """Initialize CLI runner with shared dependencies.

        Loads settings, applies them to the logger and sets up the
        command handlers.

        Args:
            settings_manager: Settings manager (defaults to the user's
                configuration directory)

        Raises:
            ConfigurationError: If the settings file is invalid

        """
        self.settings_manager = settings_manager or SettingsManager()
        self.settings = self.settings_manager.load_settings()

        update_logger_from_config()

        self._init_command_handlers()

    def _init_command_handlers(self) -> None:
        """Initialize all command handlers with shared dependencies."""
        self.command_handlers: dict[str, BaseCommandHandler] = {
            "validate": ValidateHandler(self.settings_manager, self.settings),
            "check-schema": CheckSchemaHandler(
                self.settings_manager, self.settings
            ),
            "config": ConfigHandler(self.settings_manager, self.settings),
        }

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Parses arguments, handles global flags, validates commands,
        and routes to the appropriate handler.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Process exit code

        """
        parser = CLIParser(self.settings)
        args = parser.parse_args(argv)

        # Global: --version should print package version and exit early.
        if getattr(args, "version", False):
            print(__version__)
            return EXIT_OK

        if not args.command:
            print("No command specified. Use --help.")
            return EXIT_ERROR

        try:
            return self._execute_command(args)
        except DraftvalError as e:
            logger.error("%s", e)
            return EXIT_ERROR

    def _execute_command(self, args: Namespace) -> int:
        """Execute the specified command with the appropriate handler.

        Args:
            args: Parsed command-line arguments namespace.

        Returns:
            Exit code returned by the handler.

        """
        handler = self.command_handlers[args.command]

        verbose = getattr(args, "verbose", False)
        if verbose:
            set_console_level("DEBUG")

        try:
            return handler.execute(args)
        finally:
            # Restore normal logging level
            if verbose:
                set_console_level(self.settings["console_log_level"])
