"""Process-wide logger state shared by the logger package."""

import queue
import threading
from dataclasses import dataclass, field
from logging.handlers import QueueListener
from pathlib import Path


@dataclass
class _LoggerState:
    """Mutable set-up state of the "draftval" root logger.

    ``config_applied`` records that settings file levels were loaded;
    ``log_file`` is None while file logging is off.
    """

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    config_applied: bool = False
    queue_listener: QueueListener | None = None
    log_queue: queue.Queue | None = None
    log_file: Path | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Return the logger state singleton."""
    return _state
