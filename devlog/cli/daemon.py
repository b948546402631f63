"""Daemon Typer app factory."""

import typer

from devlog.api.daemon.cmd_run import cmd_run
from devlog.api.daemon.cmd_status import cmd_status
from devlog.api.daemon.cmd_stop import cmd_stop

from ._handle_stage_result import _handle_stage_result


def daemon() -> typer.Typer:
    """Create and configure the daemon Typer app."""
    app = typer.Typer(
        name="daemon",
        help="Snapshot daemon management",
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

    @app.command(name="start")
    def start_cmd() -> None:
        """Run the daemon in the foreground.

        Runs until SIGTERM, Ctrl+C or `devlog daemon stop`. Only one daemon
        runs per user.
        """
        raise typer.Exit(cmd_run())

    @app.command(name="stop")
    def stop_cmd() -> None:
        """Stop the running daemon."""
        _handle_stage_result(cmd_stop)()

    @app.command(name="status")
    def status_cmd() -> None:
        """Check daemon status."""
        _handle_stage_result(cmd_status)()

    return app
