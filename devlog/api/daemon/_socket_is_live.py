"""Probe whether anything answers on a Unix socket path."""

import socket
from pathlib import Path


def _socket_is_live(socket_path: Path, timeout: float = 1.0) -> bool:
    """True if a connection to ``socket_path`` succeeds."""
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
        sock.settimeout(timeout)
        try:
            sock.connect(str(socket_path))
        except OSError:
            return False
    return True
