"""Control-plane wire messages.

One newline-terminated UTF-8 JSON object per request and per response, one
request per connection.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Upper bound on a single request line
MAX_MESSAGE_BYTES = 64 * 1024


class ControlRequest(BaseModel):
    """``{"command": ..., "args": {...}}``"""

    command: str
    args: dict[str, Any] | None = None

    def encode(self) -> bytes:
        return (self.model_dump_json(exclude_none=True) + "\n").encode("utf-8")


class ControlResponse(BaseModel):
    """``{"ok": ..., "data": {...}, "error": "..."}``; failures carry no data."""

    ok: bool
    data: dict[str, Any] | None = None
    error: str | None = None

    @classmethod
    def success(cls, data: dict[str, Any] | None = None) -> "ControlResponse":
        return cls(ok=True, data=data if data is not None else {})

    @classmethod
    def failure(cls, error: str) -> "ControlResponse":
        return cls(ok=False, error=error)

    def encode(self) -> bytes:
        return (self.model_dump_json(exclude_none=True) + "\n").encode("utf-8")


class WatchArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str = Field(..., min_length=1)
    name: str = ""


class UnwatchArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str = Field(..., min_length=1)
