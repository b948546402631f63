"""Integration fixtures: a real daemon running on a background thread."""

import threading

import pytest

from devlog.api.config.DevlogConfig import DevlogConfig
from devlog.api.daemon.Daemon import Daemon


class DaemonThread:
    """Run ``Daemon.run`` on a thread and expose the daemon for assertions."""

    def __init__(self, daemon: Daemon):
        self.daemon = daemon
        self.error: BaseException | None = None
        self.thread = threading.Thread(target=self._run, name="test-daemon", daemon=True)

    def _run(self) -> None:
        try:
            self.daemon.run(install_signal_handlers=False)
        except BaseException as exc:  # noqa: BLE001
            self.error = exc

    def start(self) -> "DaemonThread":
        self.thread.start()
        if not self.daemon.started.wait(timeout=10):
            raise RuntimeError(f"daemon did not start: {self.error!r}")
        return self

    def join(self, timeout: float = 10.0) -> None:
        self.thread.join(timeout=timeout)


def start_daemon(interval: float = 0.1) -> DaemonThread:
    return DaemonThread(Daemon(DevlogConfig(snapshot_interval_secs=interval))).start()


@pytest.fixture
def running_daemon(devlog_env):
    """A started daemon using the isolated XDG locations; stopped on teardown."""
    handle = start_daemon()
    yield handle
    handle.daemon.stop()
    handle.join()
