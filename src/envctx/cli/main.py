"""
Main CLI entry point.
"""

from pathlib import Path

import typer

from envctx import __version__
from envctx.cli import check, get, run, show
from envctx.config.loader import load_settings
from envctx.exceptions import ConfigurationError
from envctx.utils.logging import setup_logging_from_config


def version_callback(value: bool):
    """Callback to display version and exit."""
    if value:
        typer.echo(f"envctx version {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="envctx",
    help="envctx - load KEY=VALUE env files with ${VAR} interpolation",
    add_completion=False,
)

# Register subcommands
app.command("get")(get.get)
app.command("show")(show.show)
app.command("check")(check.check)
app.command(
    "run",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)(run.run)


@app.callback(invoke_without_command=True)
def entrypoint(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="Settings file (default: ./envctx.yaml if present)"),
    log_level: str | None = typer.Option(None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
):
    """
    envctx - load KEY=VALUE env files with ${VAR} interpolation.

    Run 'envctx <command> --help' for help on a specific command.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    try:
        settings = load_settings(config)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    logging_config = dict(settings.logging)
    if log_level:
        logging_config["level"] = log_level
    setup_logging_from_config({"logging": logging_config}, project_dir=settings.path.parent if settings.path else None)

    ctx.obj = {"settings": settings}


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
