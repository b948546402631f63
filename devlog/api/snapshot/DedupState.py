"""In-memory record of the last diff written per repository."""

from __future__ import annotations


class DedupState:
    """Last written diff per repository path, scoped to one calendar day.

    Never persisted. Not thread-safe; callers hold the daemon lock.
    """

    def __init__(self, active_date: str):
        self.active_date = active_date
        self._last_diffs: dict[str, bytes] = {}

    def roll_over(self, today: str) -> bool:
        """Clear all entries if ``today`` differs from the active date.

        Returns:
            True if the date changed and the state was cleared
        """
        if today == self.active_date:
            return False
        self._last_diffs.clear()
        self.active_date = today
        return True

    def get(self, repo_path: str) -> bytes:
        """Last written diff for ``repo_path``, or ``b""``."""
        return self._last_diffs.get(repo_path, b"")

    def record(self, repo_path: str, diff: bytes) -> None:
        self._last_diffs[repo_path] = diff

    def forget(self, repo_path: str) -> None:
        self._last_diffs.pop(repo_path, None)

    def __len__(self) -> int:
        return len(self._last_diffs)
