"""Get path to the daemon PID file."""

from pathlib import Path

from ...constants import PID_FILENAME
from ._runtime_path import _runtime_path


def get_pid_path() -> Path:
    """Return the canonical daemon PID file path."""
    return _runtime_path(PID_FILENAME)
