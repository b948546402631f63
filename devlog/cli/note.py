"""Note command."""

import typer

from devlog.api.note.cmd_add import cmd_add

from ._handle_stage_result import _handle_stage_result


def note(
    message: str = typer.Option("", "--message", "-m", help="Note text; opens an editor when omitted"),
) -> None:
    """Log a timestamped note for the current repository."""
    _handle_stage_result(cmd_add)(message)
