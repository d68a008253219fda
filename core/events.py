"""Structured event logging.

Writes one JSON object per line for each generation attempt, suitable for
shipping to a log pipeline. Generated values are never written; only their
shape (mode, length, word count) and the outcome.

Includes log rotation to prevent disk exhaustion and manage retention.
"""

import json
import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Optional

from core.config import EVENT_LOG_FILE, EVENT_LOG_MAX_BYTES, EVENT_LOG_BACKUP_COUNT
from core.storage import ensure_directories, read_json_lines


_logger = logging.getLogger("craftmypass.events")
_logger.propagate = False

# Module-level state
_logging_configured = False
_configure_lock = Lock()


def _configure_logging() -> None:
    """Attach a rotating file handler to the event logger on first use."""
    global _logging_configured
    with _configure_lock:
        if _logging_configured:
            return

        ensure_directories(os.path.dirname(EVENT_LOG_FILE))

        handler = RotatingFileHandler(
            EVENT_LOG_FILE,
            maxBytes=EVENT_LOG_MAX_BYTES,
            backupCount=EVENT_LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter("%(message)s"))

        _logger.setLevel(logging.INFO)
        _logger.addHandler(handler)

        _logging_configured = True


def reset_logging() -> None:
    """Detach and close the event log handlers.

    The next event reconfigures logging, picking up a changed
    ``EVENT_LOG_FILE``.
    """
    global _logging_configured
    with _configure_lock:
        for handler in list(_logger.handlers):
            _logger.removeHandler(handler)
            handler.close()
        _logging_configured = False


def log_event(
    event_type: str,
    status: str,
    source: str = "cli",
    details: Optional[dict] = None
) -> None:
    """Log event in JSON format.

    Args:
        event_type: Type of event (e.g., 'generate_password')
        status: Event status ('SUCCESS' or 'FAILURE')
        source: Front end that triggered the event ('cli' or 'api')
        details: Optional additional event details, never the generated value
    """
    _configure_logging()

    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
        "source": source,
    }

    if details:
        event["details"] = details

    level = logging.INFO if status == "SUCCESS" else logging.WARNING
    _logger.log(level, json.dumps(event))


def get_events(limit: int = 100) -> list[dict]:
    """Read and parse logged events.

    Args:
        limit: Maximum number of events to return

    Returns:
        List of parsed event dictionaries, most recent last
    """
    for handler in _logger.handlers:
        handler.flush()

    return read_json_lines(EVENT_LOG_FILE)[-limit:]
