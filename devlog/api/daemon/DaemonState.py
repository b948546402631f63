"""Mutable state shared by the daemon's threads."""

from __future__ import annotations

from ..snapshot.DedupState import DedupState
from ..watch.WatchEntry import WatchEntry
from ..watch.WatchRegistry import WatchRegistry
from .ReadWriteLock import ReadWriteLock


class DaemonState:
    """Watch registry and dedup state behind one reader/writer lock.

    Owned by a :class:`Daemon` instance and handed to its scheduler and
    control handler. Touch ``registry`` and ``dedup`` only while holding
    ``lock``.
    """

    def __init__(self, registry: WatchRegistry, today: str):
        self.registry = registry
        self.dedup = DedupState(today)
        self.lock = ReadWriteLock()

    def entries(self) -> list[WatchEntry]:
        """Copy of the registry entries, taken under a read lock."""
        with self.lock.read():
            return self.registry.entries
