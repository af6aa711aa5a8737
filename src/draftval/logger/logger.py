"""Main logger module providing public API functions.

- setup_logging(): Configure logging with the QueueHandler architecture
- get_logger(): Get or create a logger under the "draftval" root
- enable_file_logging(): Attach a rotating file handler at runtime
- flush_all_handlers(): Ensure pending log records are written
- clear_logger_state(): Reset global logger state for testing
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from draftval.config.paths import Paths
from draftval.logger.config import load_log_settings
from draftval.logger.handlers import (
    ROOT_LOGGER_NAME,
    create_file_handler,
    setup_root_logger,
    start_listener,
)
from draftval.logger.state import get_state


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener to ensure writes complete.

    Waits (bounded) for the queue to drain, then flushes every handler.
    Safe to call from any thread.
    """
    state = get_state()
    if state.queue_listener is not None and state.log_queue is not None:
        # QueueListener doesn't use task_done(), so poll the queue
        timeout = 5.0
        start_time = time.time()
        while not state.log_queue.empty():
            if time.time() - start_time > timeout:
                break
            time.sleep(0.01)

        # Give queue listener thread time to process final records
        time.sleep(0.1)

        for handler in state.queue_listener.handlers:
            with contextlib.suppress(OSError, ValueError):
                handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure logging and return the named logger.

    The root "draftval" logger is initialized exactly once; child loggers
    ("draftval.core.objects", ...) propagate to it.

    Handler Configuration (via QueueListener):
        - Console Handler: StreamHandler to stderr, hybrid formatting
        - File Handler: RotatingFileHandler, only when a log file is given
          (argument or DRAFTVAL_LOG_DIR)

    Args:
        name: Logger name, typically __name__
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file; None leaves file logging off unless
            the environment requests it

    Returns:
        Logger instance (singleton per name via logging.getLogger)

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get or create logger instance.

    This is the recommended way to get a logger in draftval modules:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Resolving %s", uri)  # Use %-style formatting

    Args:
        name: Logger name, typically __name__ for module loggers

    Returns:
        Configured logger instance (singleton per name)

    """
    return setup_logging(name=name)


def enable_file_logging(
    log_file: Path | None = None, file_level: str = "INFO"
) -> Path:
    """Attach a rotating file handler to the running QueueListener.

    Args:
        log_file: Log file path (default: Paths.get_log_file())
        file_level: File log level

    Returns:
        Path of the active log file

    Raises:
        ConfigurationError: If the log file cannot be opened

    """
    setup_logging()
    state = get_state()
    with state.lock:
        if state.log_file is not None:
            return state.log_file
        target = log_file or Paths.get_log_file()
        file_handler = create_file_handler(target, file_level)
        handlers = list(state.queue_listener.handlers) if state.queue_listener else []
        start_listener(state, [*handlers, file_handler])
        state.log_file = target
        return target


def set_console_level(level: str) -> None:
    """Change the console handler level (e.g. for --verbose)."""
    state = get_state()
    if state.queue_listener is None:
        return
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    for handler in state.queue_listener.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, logging.FileHandler
        ):
            handler.setLevel(numeric_level)


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Stops the QueueListener, closes handlers and resets state flags.
    Module-level loggers stay registered so they keep working after the
    next setup_logging(). Intended for tests only.
    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            for handler in state.queue_listener.handlers:
                handler.close()
            state.queue_listener.stop()
            state.queue_listener = None

        state.log_queue = None
        state.log_file = None
        state.root_initialized = False
        state.config_applied = False

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
