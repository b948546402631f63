"""Watch Typer app factory."""

from pathlib import Path

import typer

from devlog.api.watch.cmd_add import cmd_add
from devlog.api.watch.cmd_list import cmd_list
from devlog.api.watch.cmd_remove import cmd_remove

from ._handle_stage_result import _handle_stage_result


def watch() -> typer.Typer:
    """Create and configure the watch Typer app."""
    app = typer.Typer(
        name="watch",
        help="Manage watched repositories",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="add")
    def add_cmd(
        path: Path = typer.Argument(Path("."), help="Directory inside the repository"),
        name: str = typer.Option("", "--name", "-n", help="Project name (default: repository directory name)"),
    ) -> None:
        """Start snapshotting a repository."""
        _handle_stage_result(cmd_add)(path, name)

    @app.command(name="remove")
    def remove_cmd(
        path: Path = typer.Argument(Path("."), help="Directory inside the repository"),
    ) -> None:
        """Stop snapshotting a repository."""
        _handle_stage_result(cmd_remove)(path)

    @app.command(name="list")
    def list_cmd() -> None:
        """List watched repositories."""
        _handle_stage_result(cmd_list)()

    return app
