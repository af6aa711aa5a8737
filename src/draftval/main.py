"""Main CLI entry point for draftval.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to specialized command
handlers and CLI components.
"""

import sys
from collections.abc import Sequence

from draftval.cli import CLIRunner
from draftval.constants import EXIT_ERROR
from draftval.exceptions import DraftvalError
from draftval.logger import get_logger

logger = get_logger(__name__)


def main(argv: Sequence[str] | None = None) -> None:
    """Run the CLI application and exit with its status code.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    """
    logger.debug("CLI started")
    try:
        runner = CLIRunner()
        exit_code = runner.run(argv)
        logger.debug("CLI finished with exit code %d", exit_code)
    except KeyboardInterrupt:
        logger.info("CLI cancelled by user")
        sys.exit(EXIT_ERROR)
    except DraftvalError as e:
        # Settings errors surface before any command runs
        logger.error("%s", e)
        sys.exit(EXIT_ERROR)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
