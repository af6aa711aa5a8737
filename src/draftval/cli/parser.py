"""CLI argument parser for draftval.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path

from draftval.config import Settings
from draftval.constants import OUTPUT_JSON, OUTPUT_TEXT


class CLIParser:
    """Command-line argument parser for draftval."""

    def __init__(self, settings: Settings) -> None:
        """Initialize the CLI parser with loaded settings.

        Args:
            settings: Effective settings, used for option defaults.

        """
        self.settings = settings

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:]).

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self.create_parser()
        return parser.parse_args(argv)

    def create_parser(self) -> argparse.ArgumentParser:
        """Build the full parser with global options and subcommands."""
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser

    def _create_main_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser.

        Returns:
            argparse.ArgumentParser: The configured main parser.

        """
        return argparse.ArgumentParser(
            prog="draftval",
            description="Validate JSON documents against draft-4 JSON schemas",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Validate one or more documents
  %(prog)s validate person.schema.json person.json
  %(prog)s validate person.schema.json a.json b.json --output json

  # Draft-3 style per-property "required" flags
  %(prog)s validate legacy.schema.json data.json --draft3-required

  # Check a schema against the draft-4 metaschema
  %(prog)s check-schema person.schema.json

  # Show or create settings
  %(prog)s config --show
  %(prog)s config --init
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add global options to the main parser.

        Args:
            parser: The main parser to add options to.

        """
        # Long form only to avoid colliding with -v / --verbose
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show draftval version and exit",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        """Add all subcommands to the parser.

        Args:
            parser: The main ArgumentParser instance.

        """
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        self._add_validate_command(subparsers)
        self._add_check_schema_command(subparsers)
        self._add_config_command(subparsers)

    def _add_validate_command(self, subparsers) -> None:
        """Add validate command parser.

        Args:
            subparsers: The subparsers object to add the command to.

        """
        validate_parser = subparsers.add_parser(
            "validate",
            help="Validate data documents against a schema",
        )
        validate_parser.add_argument("schema", type=Path, help="Schema file")
        validate_parser.add_argument(
            "data",
            type=Path,
            nargs="+",
            help="Data file(s) to validate",
        )
        validate_parser.add_argument(
            "--draft3-required",
            action="store_true",
            default=self.settings["draft3_required"],
            help="Read 'required' as a per-property flag (draft 3)",
        )
        validate_parser.add_argument(
            "--base-dir",
            type=Path,
            default=None,
            help="Directory for relative $ref file paths",
        )
        validate_parser.add_argument(
            "--output",
            choices=(OUTPUT_TEXT, OUTPUT_JSON),
            default=OUTPUT_TEXT,
            help="Report format",
        )
        validate_parser.add_argument(
            "--check-schema",
            action="store_true",
            help="Check the schema against the draft-4 metaschema first",
        )
        validate_parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging (reference resolution)",
        )

    def _add_check_schema_command(self, subparsers) -> None:
        """Add check-schema command parser.

        Args:
            subparsers: The subparsers object to add the command to.

        """
        check_parser = subparsers.add_parser(
            "check-schema",
            help="Check schema files against the draft-4 metaschema",
        )
        check_parser.add_argument(
            "schemas",
            type=Path,
            nargs="+",
            help="Schema file(s) to check",
        )

    def _add_config_command(self, subparsers) -> None:
        """Add config command parser.

        Args:
            subparsers: The subparsers object to add the command to.

        """
        config_parser = subparsers.add_parser(
            "config",
            help="Show or initialize settings",
        )
        group = config_parser.add_mutually_exclusive_group(required=True)
        group.add_argument(
            "--show",
            action="store_true",
            help="Print effective settings",
        )
        group.add_argument(
            "--init",
            action="store_true",
            help="Write a settings file with default values",
        )
