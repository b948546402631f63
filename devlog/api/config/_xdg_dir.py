"""Resolve an XDG base directory (UNO: single function)."""

import os
from pathlib import Path


def _xdg_dir(env_var: str, *fallback: str) -> Path:
    """Return ``$env_var`` if set and non-empty, else ``~/<fallback...>``."""
    value = os.environ.get(env_var)
    if value:
        return Path(value).expanduser()
    return Path.home().joinpath(*fallback)
