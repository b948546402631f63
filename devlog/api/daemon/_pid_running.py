"""Check if a process ID is running."""

import os


def _pid_running(pid: int) -> bool:
    """Check if a process ID is running.

    A process owned by another user still counts as running.
    """
    if pid <= 0:
        return False
    try:
        os.kill(pid, 0)
    except PermissionError:
        return True
    except OSError:
        return False
    return True
