"""Daemon module - control plane, snapshot scheduler and lifecycle."""

from .ControlHandler import ControlHandler
from .ControlServer import ControlServer
from .Daemon import Daemon
from .DaemonAlreadyRunningError import DaemonAlreadyRunningError
from .DaemonNotRunningError import DaemonNotRunningError
from .DaemonState import DaemonState
from .protocol import ControlRequest, ControlResponse, UnwatchArgs, WatchArgs
from .ReadWriteLock import ReadWriteLock
from .send_request import send_request
from .SnapshotScheduler import SnapshotScheduler

__all__ = [
    "ControlHandler",
    "ControlRequest",
    "ControlResponse",
    "ControlServer",
    "Daemon",
    "DaemonAlreadyRunningError",
    "DaemonNotRunningError",
    "DaemonState",
    "ReadWriteLock",
    "SnapshotScheduler",
    "UnwatchArgs",
    "WatchArgs",
    "send_request",
]
