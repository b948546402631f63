"""Per-user runtime file location (UNO: single function)."""

import os
from pathlib import Path

from ...constants import APP_NAME


def _runtime_path(filename: str) -> Path:
    """Return ``$XDG_RUNTIME_DIR/<filename>``.

    When ``XDG_RUNTIME_DIR`` is unset, falls back to a deterministic
    ``/tmp/devlog-<uid>.<ext>`` so that every client of the same user agrees
    on the location.
    """
    runtime_dir = os.environ.get("XDG_RUNTIME_DIR")
    if runtime_dir:
        return Path(runtime_dir) / filename
    suffix = Path(filename).suffix
    return Path("/tmp") / f"{APP_NAME}-{os.getuid()}{suffix}"
