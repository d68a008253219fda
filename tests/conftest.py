"""Shared test fixtures."""

import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import events


@pytest.fixture(autouse=True)
def event_log(tmp_path, monkeypatch):
    """Send event logging to a per-test file."""
    log_file = tmp_path / "logs" / "events.jsonl"
    events.reset_logging()
    monkeypatch.setattr(events, "EVENT_LOG_FILE", str(log_file))
    yield log_file
    events.reset_logging()
