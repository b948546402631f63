"""Client side of the control plane: one request, one response, one connection."""

from __future__ import annotations

import socket
from pathlib import Path

from ..config.get_socket_path import get_socket_path
from .DaemonNotRunningError import DaemonNotRunningError
from .protocol import MAX_MESSAGE_BYTES, ControlRequest, ControlResponse


def send_request(
    request: ControlRequest,
    socket_path: Path | None = None,
    timeout: float = 10.0,
) -> ControlResponse:
    """Send ``request`` to the daemon and return its response.

    Raises:
        DaemonNotRunningError: If the socket is missing or refuses connections
        ConnectionError: If the daemon closes the connection without answering
        pydantic.ValidationError: If the response is not a valid message
    """
    path = socket_path or get_socket_path()

    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
        sock.settimeout(timeout)
        try:
            sock.connect(str(path))
        except (FileNotFoundError, ConnectionRefusedError) as exc:
            raise DaemonNotRunningError(f"devlog daemon is not running (no answer on {path})") from exc

        sock.sendall(request.encode())
        with sock.makefile("rb") as rfile:
            line = rfile.readline(MAX_MESSAGE_BYTES)

    if not line:
        raise ConnectionError(f"devlog daemon closed the connection without answering {request.command!r}")
    return ControlResponse.model_validate_json(line)
