"""Append a note entry to a project's note log."""

from datetime import datetime
from pathlib import Path

from ...constants import ENTRY_TIME_FORMAT


def write_note(log_file: Path, text: str, now: datetime | None = None) -> None:
    """Append ``=== NOTE HH:MM ===``, ``text`` and a blank line to ``log_file``."""
    stamp = (now or datetime.now()).strftime(ENTRY_TIME_FORMAT)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    with log_file.open("a", encoding="utf-8") as fh:
        fh.write(f"=== NOTE {stamp} ===\n{text}\n\n")
