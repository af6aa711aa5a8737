"""Command handlers for the draftval CLI."""

from draftval.cli.commands.base import BaseCommandHandler
from draftval.cli.commands.check_schema import CheckSchemaHandler
from draftval.cli.commands.config import ConfigHandler
from draftval.cli.commands.validate import ValidateHandler

__all__ = [
    "BaseCommandHandler",
    "CheckSchemaHandler",
    "ConfigHandler",
    "ValidateHandler",
]
