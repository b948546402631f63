"""Output schemas for note commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class NoteAddOutput(BaseOutputSchema):
    """Output schema for note add command."""

    project: str = Field(..., description="Project the note was filed under, empty string if unresolved")
    log_path: str = Field(..., description="Note log written to, empty string if nothing was written")
    written: bool = Field(..., description="Whether a note entry was appended")


register_output_schema("note", "add", NoteAddOutput)
