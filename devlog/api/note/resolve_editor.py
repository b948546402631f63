"""Pick the editor for interactive notes."""

import os

from ...constants import DEFAULT_EDITOR
from ..config.DevlogConfig import DevlogConfig


def resolve_editor(config: DevlogConfig) -> str:
    """``$EDITOR``, then ``config.editor``, then ``vi``."""
    return os.environ.get("EDITOR") or config.editor or DEFAULT_EDITOR
