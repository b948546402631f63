"""Output schemas for daemon commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class DaemonStatusOutput(BaseOutputSchema):
    """Output schema for daemon status command.

    All fields must always be present for consistency.
    """

    running: bool = Field(..., description="Whether daemon is running")
    pid: int = Field(..., description="Process ID if running, -1 if not running")
    socket_path: str = Field(..., description="Control socket path")
    watched: list[dict[str, str]] = Field(..., description="Watched repositories, empty if not running")


class DaemonStopOutput(BaseOutputSchema):
    """Output schema for daemon stop command."""

    stopped: bool = Field(..., description="Whether a running daemon acknowledged the stop request")
    exited: bool = Field(..., description="Whether the PID file disappeared within the wait period")
    pid_path: str = Field(..., description="PID file that was polled")


register_output_schema("daemon", "status", DaemonStatusOutput)
register_output_schema("daemon", "stop", DaemonStopOutput)
