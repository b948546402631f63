"""Get path to the devlog config file."""

from pathlib import Path

from ...constants import APP_NAME, CONFIG_FILENAME
from ._xdg_dir import _xdg_dir


def get_config_path() -> Path:
    """Return ``$XDG_CONFIG_HOME/devlog/config.json`` (default ``~/.config``)."""
    return _xdg_dir("XDG_CONFIG_HOME", ".config") / APP_NAME / CONFIG_FILENAME
