"""Validate command handler."""

from argparse import Namespace
from typing import Any

from draftval.cli.commands.base import BaseCommandHandler
from draftval.constants import EXIT_INVALID, EXIT_OK, OUTPUT_JSON
from draftval.core import validate
from draftval.documents import dump_document, load_document
from draftval.domain.errors import SchemaError
from draftval.logger import get_logger
from draftval.metaschema import check_schema
from draftval.ui import format_error_tree

logger = get_logger(__name__)


class ValidateHandler(BaseCommandHandler):
    """Handler for the validate command."""

    def execute(self, args: Namespace) -> int:
        """Validate each data file against the schema.

        Args:
            args: Parsed arguments (schema, data, draft3_required, base_dir,
                output, check_schema, verbose)

        Returns:
            EXIT_OK when every document is valid, EXIT_INVALID otherwise

        Raises:
            DocumentLoadError: If the schema or a data file cannot be loaded
            SchemaDefinitionError: If --check-schema rejects the schema

        """
        schema = load_document(args.schema, "schema")
        if args.check_schema:
            check_schema(schema, str(args.schema))

        options = self.settings_manager.build_options(
            schema,
            self.settings,
            draft3_required=args.draft3_required,
            base_dir=args.base_dir,
        )

        results: dict[str, SchemaError | None] = {}
        for data_path in args.data:
            data = load_document(data_path, "data")
            error = validate(schema, data, options)
            logger.debug(
                "Validated %s: %s", data_path, "valid" if error is None else "invalid"
            )
            results[str(data_path)] = error

        if args.output == OUTPUT_JSON:
            self._print_json(results)
        else:
            self._print_text(results)

        if any(error is not None for error in results.values()):
            return EXIT_INVALID
        return EXIT_OK

    @staticmethod
    def _print_text(results: dict[str, SchemaError | None]) -> None:
        for name, error in results.items():
            if error is None:
                print(f"{name}: OK")
                continue
            print(f"{name}: INVALID")
            for line in format_error_tree(error):
                print(f"  {line}")

    @staticmethod
    def _print_json(results: dict[str, SchemaError | None]) -> None:
        report: dict[str, Any] = {
            name: None if error is None else error.to_dict()
            for name, error in results.items()
        }
        print(dump_document(report))
