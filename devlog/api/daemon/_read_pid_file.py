"""Read the daemon PID file (UNO: single function)."""

from pathlib import Path


def _read_pid_file(pid_path: Path) -> int | None:
    """Return the PID stored in ``pid_path``, or None if missing or unreadable."""
    try:
        text = pid_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None
    try:
        return int(text)
    except ValueError:
        return None
