"""Raised when another daemon instance owns the PID file or socket."""


class DaemonAlreadyRunningError(RuntimeError):
    """Startup found a live daemon.

    Attributes:
        pid: PID of the running daemon, or None if only the socket answered
    """

    def __init__(self, pid: int | None = None):
        self.pid = pid
        message = f"devlog daemon is already running (PID {pid})" if pid else "devlog daemon is already running"
        super().__init__(message)
