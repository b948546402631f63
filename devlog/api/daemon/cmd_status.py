"""Daemon status command (asks the running daemon over the control socket)."""

from collections.abc import Iterator

from pydantic import ValidationError

from .._output_schemas.daemon import DaemonStatusOutput
from ..config.get_socket_path import get_socket_path
from ..StageResult import StageResult
from .DaemonNotRunningError import DaemonNotRunningError
from .protocol import ControlRequest
from .send_request import send_request


def cmd_status() -> StageResult:
    """Return daemon status: running flag, PID and watched repositories."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        socket_path = get_socket_path()
        yield (0.2, "Contacting daemon...")
        try:
            response = send_request(ControlRequest(command="status"), socket_path=socket_path)
        except DaemonNotRunningError:
            yield (1.0, "Complete")
            result_obj.result = "Daemon is not running"
            result_obj.output = DaemonStatusOutput(
                errors=[],
                warnings=[],
                running=False,
                pid=-1,
                socket_path=str(socket_path),
                watched=[],
            ).model_dump(mode="python")
            result_obj.success = True
            return
        except (OSError, ValidationError) as exc:
            yield (1.0, "Complete")
            result_obj.result = f"Error checking daemon status: {exc}"
            result_obj.output = DaemonStatusOutput(
                errors=[str(exc)],
                warnings=[],
                running=False,
                pid=-1,
                socket_path=str(socket_path),
                watched=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        data = response.data or {}
        if not response.ok:
            result_obj.result = f"Error checking daemon status: {response.error}"
            result_obj.output = DaemonStatusOutput(
                errors=[response.error or "unknown error"],
                warnings=[],
                running=True,
                pid=-1,
                socket_path=str(socket_path),
                watched=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        watched = data.get("watched", [])
        pid = data.get("pid", -1)
        result_obj.result = f"Daemon running (PID {pid}), watching {len(watched)} repositories"
        result_obj.output = DaemonStatusOutput(
            errors=[],
            warnings=[],
            running=True,
            pid=pid,
            socket_path=str(socket_path),
            watched=watched,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Checking daemon status...",
        progress_callback=do_work,
    )
