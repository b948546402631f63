"""Daemon stop command - asks the daemon to exit and waits for it."""

import time
from collections.abc import Iterator

from pydantic import ValidationError

from ...constants import STOP_POLL_SECS, STOP_WAIT_SECS
from .._output_schemas.daemon import DaemonStopOutput
from ..config.get_pid_path import get_pid_path
from ..StageResult import StageResult
from .DaemonNotRunningError import DaemonNotRunningError
from .protocol import ControlRequest
from .send_request import send_request


def cmd_stop(wait_secs: float = STOP_WAIT_SECS) -> StageResult:
    """Send ``stop`` and poll until the PID file disappears or ``wait_secs`` pass."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        pid_path = get_pid_path()
        yield (0.1, "Sending stop request...")
        try:
            response = send_request(ControlRequest(command="stop"))
        except DaemonNotRunningError:
            yield (1.0, "Complete")
            result_obj.result = "Daemon is not running"
            result_obj.output = DaemonStopOutput(
                errors=[],
                warnings=["daemon was not running"],
                stopped=False,
                exited=not pid_path.exists(),
                pid_path=str(pid_path),
            ).model_dump(mode="python")
            result_obj.success = True
            return
        except (OSError, ValidationError) as exc:
            yield (1.0, "Complete")
            result_obj.result = f"Error stopping daemon: {exc}"
            result_obj.output = DaemonStopOutput(
                errors=[str(exc)],
                warnings=[],
                stopped=False,
                exited=False,
                pid_path=str(pid_path),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        if not response.ok:
            yield (1.0, "Complete")
            result_obj.result = f"Error stopping daemon: {response.error}"
            result_obj.output = DaemonStopOutput(
                errors=[response.error or "unknown error"],
                warnings=[],
                stopped=False,
                exited=False,
                pid_path=str(pid_path),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.4, "Waiting for daemon to exit...")
        deadline = time.monotonic() + wait_secs
        while pid_path.exists() and time.monotonic() < deadline:
            time.sleep(STOP_POLL_SECS)
        exited = not pid_path.exists()

        yield (1.0, "Complete")
        warnings = [] if exited else [f"PID file {pid_path} still present after {wait_secs:g}s"]
        result_obj.result = "Daemon stopped" if exited else "Stop requested; daemon has not exited yet"
        result_obj.output = DaemonStopOutput(
            errors=[],
            warnings=warnings,
            stopped=True,
            exited=exited,
            pid_path=str(pid_path),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Stopping daemon...",
        progress_callback=do_work,
    )
