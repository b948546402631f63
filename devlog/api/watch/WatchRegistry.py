"""Durable, ordered set of watched repositories."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config.get_state_path import get_state_path
from .NameConflictError import NameConflictError
from .WatchEntry import WatchEntry


class _StateFile(BaseModel):
    """On-disk layout of the registry file."""

    model_config = ConfigDict(extra="ignore")

    watched: list[WatchEntry] = Field(default_factory=list)


class WatchRegistry:
    """Ordered collection of :class:`WatchEntry` mirrored to a JSON file.

    Paths and names are both unique. ``add`` and ``remove`` persist the whole
    collection after every change when the registry is bound to a file. The
    registry itself is not thread-safe; the daemon guards it with its own lock.
    """

    def __init__(self, entries: list[WatchEntry] | None = None, path: Path | None = None):
        self._entries: list[WatchEntry] = list(entries or [])
        self.path = path

    @classmethod
    def load(cls, path: Path | None = None) -> WatchRegistry:
        """Read the registry file; a missing file is an empty registry.

        Raises:
            ValueError: If the file exists but cannot be read or is not a valid
                registry document
        """
        state_path = path if path is not None else get_state_path()
        if not state_path.exists():
            return cls([], path=state_path)

        try:
            raw = json.loads(state_path.read_text(encoding="utf-8"))
            state = _StateFile.model_validate(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in state file {state_path}: {e}") from e
        except ValidationError as e:
            raise ValueError(f"Invalid state file {state_path}: {e.errors()[0].get('msg', e)}") from e
        except OSError as e:
            raise ValueError(f"Cannot read state file {state_path}: {e}") from e
        return cls(state.watched, path=state_path)

    def save(self) -> None:
        """Replace the registry file atomically (temp file in same dir, then rename)."""
        if self.path is None:
            raise ValueError("WatchRegistry has no backing file")
        self.path.parent.mkdir(parents=True, exist_ok=True)

        content = _StateFile(watched=self._entries).model_dump_json(indent=2) + "\n"
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=self.path.parent,
                delete=False,
                prefix="state-",
                suffix=".json.tmp",
            ) as fh:
                tmp_path = Path(fh.name)
                fh.write(content)
            os.replace(tmp_path, self.path)
        except OSError:
            if tmp_path is not None:
                with suppress(OSError):
                    tmp_path.unlink()
            raise

    @property
    def entries(self) -> list[WatchEntry]:
        """Copy of the entries in registry order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WatchRegistry):
            return NotImplemented
        return self._entries == other._entries

    def find(self, path: Path | str) -> WatchEntry | None:
        """Entry for ``path``, or None."""
        key = str(path)
        for entry in self._entries:
            if entry.path == key:
                return entry
        return None

    def add(self, path: Path | str, name_override: str = "") -> bool:
        """Watch ``path`` under ``name_override`` or its final path segment.

        Adding a path that is already watched is a no-op.

        Returns:
            True if an entry was appended, False if ``path`` was already watched

        Raises:
            NameConflictError: If the effective name belongs to another path
            OSError: If persisting fails; the in-memory change is kept
        """
        key = str(path)
        if self.find(key) is not None:
            return False

        name = name_override or Path(key).name
        for entry in self._entries:
            if entry.name == name:
                raise NameConflictError(name, entry.path)

        self._entries.append(WatchEntry(path=key, name=name))
        if self.path is not None:
            self.save()
        return True

    def remove(self, path: Path | str) -> bool:
        """Stop watching ``path``.

        Returns:
            True if an entry was removed, False if ``path`` was not watched

        Raises:
            OSError: If persisting fails; the in-memory change is kept
        """
        key = str(path)
        kept = [entry for entry in self._entries if entry.path != key]
        if len(kept) == len(self._entries):
            return False
        self._entries = kept
        if self.path is not None:
            self.save()
        return True

    def resolve_project_name(self, path: Path | str, name_override: str = "") -> str:
        """Map a repository path to its project name.

        Precedence: ``name_override``, then the registered name, then the
        final path segment.
        """
        if name_override:
            return name_override
        entry = self.find(path)
        if entry is not None:
            return entry.name
        return Path(str(path)).name

    def to_list(self) -> list[dict[str, str]]:
        """Entries as plain dicts, for wire and display output."""
        return [entry.model_dump() for entry in self._entries]
