"""Top-level devlog configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import DEFAULT_GIT_PATH, DEFAULT_NOTES_PATH, DEFAULT_SNAPSHOT_INTERVAL_SECS
from .ConfigError import ConfigError
from .get_config_path import get_config_path
from .get_raw_dir import get_raw_dir
from .LogConfig import LogConfig
from .resolve_path_template import resolve_path_template


class DevlogConfig(BaseModel):
    """Configuration for the devlog daemon and clients.

    Every field has a default, so a missing config file is a valid (empty)
    configuration.
    """

    model_config = ConfigDict(extra="forbid")

    snapshot_interval_secs: float = Field(
        DEFAULT_SNAPSHOT_INTERVAL_SECS, gt=0, description="Seconds between snapshot cycles"
    )
    raw_dir: str = Field("", description="Root of per-day raw logs; empty uses the XDG data dir")
    git_path: str = Field(DEFAULT_GIT_PATH, description="Snapshot log path template")
    notes_path: str = Field(DEFAULT_NOTES_PATH, description="Note log path template")
    editor: str = Field("", description="Editor for interactive notes; $EDITOR wins")
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Path to config file."""
        return get_config_path()

    @classmethod
    def load(cls) -> "DevlogConfig":
        """Load and validate config from file.

        A missing file yields defaults.

        Raises:
            ConfigError: If the file is unreadable, not valid JSON, or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return self.model_dump(mode="python")

    def save(self) -> None:
        """Save the configuration atomically (write temp file, then rename)."""
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise ConfigError(f"Failed to save config: {e}") from e

    @property
    def raw_path(self) -> Path:
        """Resolved raw log directory."""
        return get_raw_dir(self)

    def git_log_path(self, date: str, project: str) -> Path:
        """Snapshot log file for ``project`` on ``date``."""
        return resolve_path_template(self.git_path, self.raw_path, date, project)

    def notes_log_path(self, date: str, project: str) -> Path:
        """Note log file for ``project`` on ``date``."""
        return resolve_path_template(self.notes_path, self.raw_path, date, project)
