"""Config command handler."""

from argparse import Namespace

from draftval.cli.commands.base import BaseCommandHandler
from draftval.config import Paths
from draftval.constants import EXIT_OK
from draftval.logger import get_logger

logger = get_logger(__name__)


class ConfigHandler(BaseCommandHandler):
    """Handler for the config command."""

    def execute(self, args: Namespace) -> int:
        """Show effective settings or write the default settings file.

        Args:
            args: Parsed arguments (show, init)

        Returns:
            EXIT_OK

        """
        if args.init:
            self._init_settings()
        else:
            self._show_settings()
        return EXIT_OK

    def _show_settings(self) -> None:
        settings = self.settings
        print(f"Settings file: {self.settings_manager.settings_file}")
        print(f"  Config version:     {settings['config_version']}")
        print(f"  Draft-3 required:   {settings['draft3_required']}")
        print(f"  Log level:          {settings['log_level']}")
        print(f"  Console log level:  {settings['console_log_level']}")
        print(f"  $ref base dir:      {settings['base_dir'] or '(cwd)'}")
        print(f"  File logging:       {settings['file_logging']}")
        print(f"  Logs directory:     {Paths.get_logs_dir()}")

    def _init_settings(self) -> None:
        settings_file = self.settings_manager.settings_file
        if settings_file.exists():
            print(f"Settings file already exists: {settings_file}")
            return
        defaults = self.settings_manager.load_default_settings()
        self.settings_manager.save_settings(defaults)
        print(f"Created {settings_file}")
