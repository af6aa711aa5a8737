"""CLI package for draftval.

This package contains the command-line interface components
including argument parsing and command execution.
"""

from draftval.cli.parser import CLIParser
from draftval.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
