"""Watch module - the registry of repositories the daemon snapshots."""

from .NameConflictError import NameConflictError
from .NotARepositoryError import NotARepositoryError
from .resolve_repo_root import resolve_repo_root
from .WatchEntry import WatchEntry
from .WatchRegistry import WatchRegistry

__all__ = [
    "NameConflictError",
    "NotARepositoryError",
    "WatchEntry",
    "WatchRegistry",
    "resolve_repo_root",
]
