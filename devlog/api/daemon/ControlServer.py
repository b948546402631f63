"""Unix-domain socket listener that serves one request per connection."""

from __future__ import annotations

import contextlib
import logging
import socket
import threading
from collections.abc import Callable
from pathlib import Path

from .protocol import MAX_MESSAGE_BYTES, ControlResponse

logger = logging.getLogger(__name__)

# How often the acceptor wakes up to check for shutdown
ACCEPT_POLL_SECS = 0.5
# Per-connection read/write timeout
CLIENT_TIMEOUT_SECS = 30.0


class ControlServer:
    """Accept control connections and hand each one to its own thread.

    ``handler`` turns one raw request line into a :class:`ControlResponse`.
    A slow client only ties up its own handler thread.
    """

    def __init__(self, socket_path: Path, handler: Callable[[bytes], ControlResponse]):
        self.socket_path = socket_path
        self._handler = handler
        self._server: socket.socket | None = None
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()
        self._owns_socket = False

    def start(self) -> None:
        """Bind the socket and start the accept loop.

        The caller is responsible for clearing a stale socket file first.

        Raises:
            OSError: If the socket cannot be bound
        """
        if self._thread and self._thread.is_alive():
            return

        self.socket_path.parent.mkdir(parents=True, exist_ok=True)
        server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            server.bind(str(self.socket_path))
            server.listen()
        except OSError:
            server.close()
            raise
        server.settimeout(ACCEPT_POLL_SECS)
        self._server = server
        self._owns_socket = True
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._serve, name="devlog-control-acceptor", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop accepting, close the socket and remove its file.

        Handlers already running finish their current request.
        """
        self._stop_event.set()
        if self._thread:
            self._thread.join(timeout=ACCEPT_POLL_SECS * 4)
            self._thread = None
        if self._server:
            with contextlib.suppress(OSError):
                self._server.close()
            self._server = None
        if self._owns_socket:
            with contextlib.suppress(FileNotFoundError):
                self.socket_path.unlink()
            self._owns_socket = False

    def _serve(self) -> None:
        assert self._server is not None
        while not self._stop_event.is_set():
            try:
                conn, _ = self._server.accept()
            except TimeoutError:
                continue
            except OSError as exc:
                if self._stop_event.is_set():
                    break
                logger.warning("accept error: %s", exc)
                continue
            threading.Thread(
                target=self._handle_client, args=(conn,), name="devlog-control-conn", daemon=True
            ).start()

    def _handle_client(self, conn: socket.socket) -> None:
        with conn:
            conn.settimeout(CLIENT_TIMEOUT_SECS)
            try:
                with conn.makefile("rb") as rfile:
                    line = rfile.readline(MAX_MESSAGE_BYTES)
                if not line:
                    return
                response = self._handler(line)
                conn.sendall(response.encode())
            except OSError as exc:
                logger.debug("control connection dropped: %s", exc)
