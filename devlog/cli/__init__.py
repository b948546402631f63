"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from devlog.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from devlog import __version__

        print(f"devlog {__version__}")
        return 0

    app = _create_app()
    try:
        # Without standalone mode, typer.Exit comes back as the return value
        rv = app(argv, standalone_mode=False)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        return e.exit_code
    except click.exceptions.Abort:
        return 1
    return rv if isinstance(rv, int) else 0
