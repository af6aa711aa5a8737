"""Base command handler for draftval CLI commands."""

from abc import ABC, abstractmethod
from argparse import Namespace

from draftval.config import Settings, SettingsManager
from draftval.logger import get_logger

logger = get_logger(__name__)


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    CLIRunner is the composition root: it creates the settings manager,
    loads settings once and injects both into every handler.
    """

    def __init__(
        self,
        settings_manager: SettingsManager,
        settings: Settings,
    ) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            settings_manager: Settings file manager
            settings: Settings loaded by the runner

        """
        self.settings_manager = settings_manager
        self.settings = settings

    @abstractmethod
    def execute(self, args: Namespace) -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments

        Returns:
            Process exit code

        """
