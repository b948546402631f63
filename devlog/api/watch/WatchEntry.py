"""A single watched repository."""

from pydantic import BaseModel, ConfigDict, Field


class WatchEntry(BaseModel):
    """Repository root and the project name its snapshots are filed under.

    Entries are immutable; renaming a project is a remove followed by an add.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., description="Absolute repository root")
    name: str = Field(..., description="Project name, unique within the registry")
