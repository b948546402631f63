"""Daemon lifecycle: singleton guard, control socket, scheduler, shutdown."""

from __future__ import annotations

import logging
import os
import signal
import threading
from collections.abc import Callable
from contextlib import suppress
from datetime import datetime
from pathlib import Path

from ...constants import DATE_FORMAT, STOP_DELAY_SECS
from ..config.DevlogConfig import DevlogConfig
from ..config.get_pid_path import get_pid_path
from ..config.get_socket_path import get_socket_path
from ..config.get_state_path import get_state_path
from ..watch.WatchRegistry import WatchRegistry
from ._pid_running import _pid_running
from ._read_pid_file import _read_pid_file
from ._socket_is_live import _socket_is_live
from .ControlHandler import ControlHandler
from .ControlServer import ControlServer
from .DaemonAlreadyRunningError import DaemonAlreadyRunningError
from .DaemonState import DaemonState
from .SnapshotScheduler import SnapshotScheduler

logger = logging.getLogger(__name__)

# How long shutdown waits for an in-flight snapshot cycle
SCHEDULER_JOIN_SECS = 10.0


class Daemon:
    """Long-running snapshot daemon.

    ``run()`` blocks in the calling thread until SIGTERM/SIGINT (when signal
    handlers are installed), a ``stop`` request, or :meth:`stop`. The control
    acceptor and the scheduler run on their own threads and all three share one
    :class:`DaemonState`.
    """

    def __init__(
        self,
        config: DevlogConfig | None = None,
        *,
        socket_path: Path | None = None,
        pid_path: Path | None = None,
        state_path: Path | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config or DevlogConfig()
        self.socket_path = socket_path or get_socket_path()
        self.pid_path = pid_path or get_pid_path()
        self.state_path = state_path or get_state_path()
        self._clock = clock
        self._shutdown = threading.Event()
        self._started = threading.Event()
        self.state: DaemonState | None = None
        self._server: ControlServer | None = None
        self._scheduler_thread: threading.Thread | None = None
        self._pid_written = False

    @property
    def started(self) -> threading.Event:
        """Set once the socket is listening and the scheduler is running."""
        return self._started

    def run(self, install_signal_handlers: bool = True) -> None:
        """Start serving and block until shutdown.

        Raises:
            DaemonAlreadyRunningError: If a live daemon owns the PID file or socket
            OSError: If the runtime directory, PID file or socket cannot be created
        """
        self._claim_pid_file()
        previous_handlers: dict[int, object] = {}
        try:
            self._clear_stale_socket()
            self.state = DaemonState(self._load_registry(), self._clock().strftime(DATE_FORMAT))

            self._server = ControlServer(self.socket_path, ControlHandler(self.state, self.request_stop))
            self._server.start()

            scheduler = SnapshotScheduler(self.state, self.config, self._shutdown, clock=self._clock)
            self._scheduler_thread = threading.Thread(
                target=scheduler.run, name="devlog-scheduler", daemon=True
            )
            self._scheduler_thread.start()

            if install_signal_handlers and threading.current_thread() is threading.main_thread():
                for signum in (signal.SIGTERM, signal.SIGINT):
                    previous_handlers[signum] = signal.signal(signum, self._handle_signal)

            logger.info(
                "devlog daemon started (PID %d), watching %d repos", os.getpid(), len(self.state.registry)
            )
            self._started.set()

            while not self._shutdown.wait(timeout=1.0):
                pass
            logger.info("shutting down")
        finally:
            self._shutdown.set()
            for signum, handler in previous_handlers.items():
                signal.signal(signum, handler)  # type: ignore[arg-type]
            self._teardown()

    def request_stop(self) -> None:
        """Shut down shortly after the current control response is sent."""
        timer = threading.Timer(STOP_DELAY_SECS, self._shutdown.set)
        timer.daemon = True
        timer.start()

    def stop(self) -> None:
        """Shut down now."""
        self._shutdown.set()

    def _handle_signal(self, signum: int, _frame) -> None:
        logger.info("received %s", signal.Signals(signum).name)
        self._shutdown.set()

    def _claim_pid_file(self) -> None:
        existing = _read_pid_file(self.pid_path)
        if existing is not None:
            if _pid_running(existing):
                raise DaemonAlreadyRunningError(existing)
            logger.info("removing stale PID file for %d", existing)
        with suppress(FileNotFoundError):
            self.pid_path.unlink()

        self.pid_path.parent.mkdir(parents=True, exist_ok=True)
        self.pid_path.write_text(str(os.getpid()), encoding="utf-8")
        self._pid_written = True

    def _clear_stale_socket(self) -> None:
        if not self.socket_path.exists():
            return
        if _socket_is_live(self.socket_path):
            raise DaemonAlreadyRunningError()
        logger.info("removing stale socket %s", self.socket_path)
        with suppress(FileNotFoundError):
            self.socket_path.unlink()

    def _load_registry(self) -> WatchRegistry:
        try:
            return WatchRegistry.load(self.state_path)
        except ValueError as exc:
            logger.warning("ignoring unreadable watch list: %s", exc)
            return WatchRegistry([], path=self.state_path)

    def _teardown(self) -> None:
        # Endpoint first, then the PID marker, so clients see the daemon gone
        # while an in-flight snapshot cycle finishes.
        if self._server is not None:
            self._server.stop()
            self._server = None
        if self._pid_written:
            # Leave the file alone if another daemon has claimed it since
            if _read_pid_file(self.pid_path) == os.getpid():
                with suppress(FileNotFoundError):
                    self.pid_path.unlink()
            self._pid_written = False
        if self._scheduler_thread is not None:
            self._scheduler_thread.join(timeout=SCHEDULER_JOIN_SECS)
            if self._scheduler_thread.is_alive():
                logger.warning("snapshot cycle still running at exit")
            self._scheduler_thread = None
        logger.info("devlog daemon stopped")
