"""Periodic snapshot loop over every watched repository."""

from __future__ import annotations

import logging
import subprocess
import threading
from collections.abc import Callable
from datetime import datetime

from ...constants import DATE_FORMAT
from ..config.DevlogConfig import DevlogConfig
from ..snapshot.SnapshotError import SnapshotError
from ..snapshot.take_snapshot import take_snapshot
from .DaemonState import DaemonState

logger = logging.getLogger(__name__)


class SnapshotScheduler:
    """Run one snapshot cycle immediately, then one every ``interval`` seconds.

    Repositories are captured one after another. The registry is copied under
    a read lock and released before any git process runs, so a slow capture
    never blocks control commands. A failing repository is logged and skipped.
    """

    def __init__(
        self,
        state: DaemonState,
        config: DevlogConfig,
        stop_event: threading.Event,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.state = state
        self.config = config
        self.interval = config.snapshot_interval_secs
        self._stop_event = stop_event
        self._clock = clock

    def run(self) -> None:
        """Loop until the stop event is set."""
        while not self._stop_event.is_set():
            self.run_cycle()
            if self._stop_event.wait(self.interval):
                break

    def run_cycle(self) -> int:
        """Capture every watched repository once.

        Returns:
            Number of snapshot entries written
        """
        now = self._clock()
        today = now.strftime(DATE_FORMAT)

        with self.state.lock.write():
            if self.state.dedup.roll_over(today):
                logger.info("date changed to %s, dedup state cleared", today)

        written = 0
        for entry in self.state.entries():
            with self.state.lock.read():
                prev_diff = self.state.dedup.get(entry.path)

            log_file = self.config.git_log_path(today, entry.name)
            try:
                diff = take_snapshot(entry.path, entry.name, log_file, prev_diff, now=now)
            except (SnapshotError, OSError, subprocess.SubprocessError) as exc:
                logger.warning("snapshot %s (%s): %s", entry.name, entry.path, exc)
                continue

            if not diff:
                continue
            if diff != prev_diff:
                written += 1
            with self.state.lock.write():
                # Skip repositories unwatched while this capture ran
                if self.state.registry.find(entry.path) is not None:
                    self.state.dedup.record(entry.path, diff)

        return written
