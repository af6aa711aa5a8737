"""Console log formatter."""

import logging

from draftval.constants import LOG_COLORS


class ConsoleFormatter(logging.Formatter):
    """Bare messages for INFO, timestamped lines with a colored level otherwise.

    Example Output:
        INFO:     "Settings saved to ~/.config/draftval/settings.conf"
        WARNING:  "12:30:45 - draftval.core.objects - WARNING - Ignoring ..."
    """

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return record.getMessage()
        color = LOG_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)
        # Color a copy; file handlers share the original record
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{LOG_COLORS['RESET']}"
        return super().format(colored)
