"""Output schemas for API commands - enforces consistent output structure.

Importing this package registers every command schema.
"""

from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema
from .config import ConfigShowOutput
from .daemon import DaemonStatusOutput, DaemonStopOutput
from .note import NoteAddOutput
from .watch import WatchAddOutput, WatchListOutput, WatchRemoveOutput

__all__ = [
    "BaseOutputSchema",
    "ConfigShowOutput",
    "DaemonStatusOutput",
    "DaemonStopOutput",
    "NoteAddOutput",
    "WatchAddOutput",
    "WatchListOutput",
    "WatchRemoveOutput",
    "get_output_schema",
    "register_output_schema",
]
