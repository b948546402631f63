"""Fetch the live watch list from the daemon."""

from ..daemon.protocol import ControlRequest
from ..daemon.send_request import send_request


def _daemon_watched() -> list[dict[str, str]]:
    """Watched entries as reported by ``status``.

    Raises:
        DaemonNotRunningError: If no daemon answers
        RuntimeError: If the daemon answers with an error
    """
    response = send_request(ControlRequest(command="status"))
    if not response.ok:
        raise RuntimeError(response.error or "status failed")
    return list((response.data or {}).get("watched", []))
