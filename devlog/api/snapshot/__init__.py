"""Snapshot capture: shadow-index diffing and per-day deduplication."""

from .DedupState import DedupState
from .SnapshotError import SnapshotError
from .take_snapshot import shadow_index_path, take_snapshot

__all__ = ["DedupState", "SnapshotError", "shadow_index_path", "take_snapshot"]
