"""Pytest configuration and fixtures."""

import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def channel():
    """Mock diagnostic channel recording group/print calls."""
    return Mock(spec=["group", "group_collapsed", "group_end", "print"])


@pytest.fixture
def log_poster():
    """Mock log poster."""
    return Mock(spec=["post_log"])


@pytest.fixture
def increment():
    """Reducer adding one to an integer state."""
    return lambda state, action: state + 1


@pytest.fixture
def make_entry():
    """Factory for TraceEntry objects with sensible defaults."""
    from store_logger.models import TraceEntry

    def _make(
        action=None,
        prev_state=None,
        next_state=1,
        started=100.0,
        took=0.5,
        error=None,
        started_time=None,
    ):
        return TraceEntry(
            started=started,
            started_time=started_time or datetime(2024, 1, 2, 3, 4, 5, 6000),
            action=action if action is not None else {"type": "INC"},
            prev_state=prev_state if prev_state is not None else {},
            took=took,
            next_state=next_state,
            error=error,
        )

    return _make
