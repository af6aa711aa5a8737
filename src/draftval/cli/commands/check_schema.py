"""Check-schema command handler."""

from argparse import Namespace

from draftval.cli.commands.base import BaseCommandHandler
from draftval.constants import EXIT_INVALID, EXIT_OK
from draftval.documents import load_document
from draftval.exceptions import SchemaDefinitionError
from draftval.logger import get_logger
from draftval.metaschema import check_schema

logger = get_logger(__name__)


class CheckSchemaHandler(BaseCommandHandler):
    """Handler for the check-schema command."""

    def execute(self, args: Namespace) -> int:
        """Check every schema file against the draft-4 metaschema.

        Each schema is reported as OK or with the most relevant
        metaschema violation. Load failures propagate.

        Args:
            args: Parsed arguments (schemas)

        Returns:
            EXIT_OK when all schemas are well formed, EXIT_INVALID otherwise

        """
        exit_code = EXIT_OK
        for schema_path in args.schemas:
            schema = load_document(schema_path, "schema")
            try:
                check_schema(schema, str(schema_path))
            except SchemaDefinitionError as e:
                logger.debug("Schema check failed: %s", e)
                print(f"{schema_path}: INVALID")
                print(f"  {e}")
                exit_code = EXIT_INVALID
            else:
                print(f"{schema_path}: OK")
        return exit_code
