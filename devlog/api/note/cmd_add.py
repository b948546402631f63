"""Note add command."""

from collections.abc import Callable, Iterator
from datetime import datetime
from pathlib import Path

import click
import typer

from ...constants import DATE_FORMAT
from .._output_schemas.note import NoteAddOutput
from ..config.ConfigError import ConfigError
from ..config.DevlogConfig import DevlogConfig
from ..StageResult import StageResult
from ..watch.NotARepositoryError import NotARepositoryError
from ..watch.resolve_repo_root import resolve_repo_root
from ..watch.WatchRegistry import WatchRegistry
from .resolve_editor import resolve_editor
from .strip_comments import strip_comments
from .write_note import write_note

NOTE_TEMPLATE = "# Project: {project}\n# Enter your note below. Lines starting with # are ignored.\n"


def _edit(template: str, editor: str) -> str | None:
    return typer.edit(template, editor=editor, extension=".md")


def cmd_add(
    message: str = "",
    cwd: Path | None = None,
    edit: Callable[[str, str], str | None] = _edit,
) -> StageResult:
    """Log a timestamped note for the repository containing ``cwd``.

    Without ``message`` the note is composed in an editor; an empty result
    cancels the note.
    """

    def _output(project: str = "", log_path: str = "", written: bool = False, **kwargs) -> dict:
        return NoteAddOutput(
            errors=kwargs.get("errors", []),
            warnings=kwargs.get("warnings", []),
            project=project,
            log_path=log_path,
            written=written,
        ).model_dump(mode="python")

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = DevlogConfig.load()
        except ConfigError as exc:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {exc}"
            result_obj.output = _output(errors=[str(exc)])
            result_obj.success = False
            return

        yield (0.2, "Resolving project...")
        try:
            repo_root = resolve_repo_root(cwd or Path.cwd())
        except NotARepositoryError:
            yield (1.0, "Complete")
            result_obj.result = "Error: not in a git repository"
            result_obj.output = _output(errors=["not in a git repository"])
            result_obj.success = False
            return

        warnings: list[str] = []
        try:
            registry = WatchRegistry.load()
        except ValueError as exc:
            warnings.append(f"ignoring unreadable watch list: {exc}")
            registry = WatchRegistry()
        project = registry.resolve_project_name(repo_root)

        text = message.strip()
        if not text:
            yield (0.4, "Opening editor...")
            try:
                edited = edit(NOTE_TEMPLATE.format(project=project), resolve_editor(config))
            except click.ClickException as exc:
                yield (1.0, "Complete")
                result_obj.result = f"Error: editor failed: {exc.format_message()}"
                result_obj.output = _output(project, errors=[exc.format_message()], warnings=warnings)
                result_obj.success = False
                return
            text = strip_comments(edited or "")
            if not text:
                yield (1.0, "Complete")
                result_obj.result = "Note cancelled (empty message)"
                result_obj.output = _output(project, warnings=[*warnings, "note cancelled (empty message)"])
                result_obj.success = True
                return

        now = datetime.now()
        log_file = config.notes_log_path(now.strftime(DATE_FORMAT), project)
        yield (0.8, "Writing note...")
        try:
            write_note(log_file, text, now)
        except OSError as exc:
            yield (1.0, "Complete")
            result_obj.result = f"Error writing note: {exc}"
            result_obj.output = _output(project, str(log_file), errors=[str(exc)], warnings=warnings)
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Logged note for {project}"
        result_obj.output = _output(project, str(log_file), True, warnings=warnings)
        result_obj.success = True

    return StageResult(
        announce="Logging note...",
        progress_callback=do_work,
    )
