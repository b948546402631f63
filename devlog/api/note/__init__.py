"""Note module - timestamped free-text entries per project."""

from .resolve_editor import resolve_editor
from .strip_comments import strip_comments
from .write_note import write_note

__all__ = ["resolve_editor", "strip_comments", "write_note"]
