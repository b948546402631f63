"""Get path to the watch registry state file."""

from pathlib import Path

from ...constants import APP_NAME, STATE_FILENAME
from ._xdg_dir import _xdg_dir


def get_state_path() -> Path:
    """Return ``$XDG_STATE_HOME/devlog/state.json`` (default ``~/.local/state``)."""
    return get_state_dir() / STATE_FILENAME


def get_state_dir() -> Path:
    """Return the per-user devlog state directory."""
    return _xdg_dir("XDG_STATE_HOME", ".local", "state") / APP_NAME
