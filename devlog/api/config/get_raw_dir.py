"""Resolve the raw log directory."""

import os
from pathlib import Path
from typing import TYPE_CHECKING

from ...constants import APP_NAME
from ._xdg_dir import _xdg_dir

if TYPE_CHECKING:
    from .DevlogConfig import DevlogConfig


def get_raw_dir(config: "DevlogConfig") -> Path:
    """Return the directory holding per-day raw logs.

    Precedence: ``DEVLOG_RAW_DIR`` env var, then ``config.raw_dir``, then
    ``$XDG_DATA_HOME/devlog/raw``.
    """
    env_dir = os.environ.get("DEVLOG_RAW_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    if config.raw_dir:
        return Path(config.raw_dir).expanduser()
    return _xdg_dir("XDG_DATA_HOME", ".local", "share") / APP_NAME / "raw"
