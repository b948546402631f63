"""Raised by clients when no daemon answers on the control socket."""


class DaemonNotRunningError(ConnectionError):
    """The control socket is missing or refuses connections."""
