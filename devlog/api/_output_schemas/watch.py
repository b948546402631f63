"""Output schemas for watch commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class WatchAddOutput(BaseOutputSchema):
    """Output schema for watch add command."""

    path: str = Field(..., description="Repository root that was requested, empty string if unresolved")
    name: str = Field(..., description="Effective project name, empty string if unresolved")
    via_daemon: bool = Field(..., description="Whether the running daemon applied the change")
    watched: list[dict[str, str]] = Field(..., description="Full registry after the command")


class WatchRemoveOutput(BaseOutputSchema):
    """Output schema for watch remove command."""

    path: str = Field(..., description="Repository root that was requested, empty string if unresolved")
    removed: bool = Field(..., description="Whether an entry was removed")
    via_daemon: bool = Field(..., description="Whether the running daemon applied the change")
    watched: list[dict[str, str]] = Field(..., description="Full registry after the command")


class WatchListOutput(BaseOutputSchema):
    """Output schema for watch list command."""

    via_daemon: bool = Field(..., description="Whether the list came from the running daemon")
    watched: list[dict[str, str]] = Field(..., description="Watched repositories in registry order")


register_output_schema("watch", "add", WatchAddOutput)
register_output_schema("watch", "remove", WatchRemoveOutput)
register_output_schema("watch", "list", WatchListOutput)
