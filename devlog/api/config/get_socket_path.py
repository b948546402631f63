"""Get path to the control-plane socket."""

from pathlib import Path

from ...constants import SOCKET_FILENAME
from ._runtime_path import _runtime_path


def get_socket_path() -> Path:
    """Return the canonical daemon control socket path."""
    return _runtime_path(SOCKET_FILENAME)
