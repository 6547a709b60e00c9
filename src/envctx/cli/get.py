"""
envctx get - Print the value of one key.
"""

from pathlib import Path

import typer

from envctx.cli.common import FILES_OPTION_HELP, load_files


def get(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Key to look up"),
    files: list[Path] | None = typer.Option(None, "--file", "-f", help=FILES_OPTION_HELP),
    default: str | None = typer.Option(None, "--default", help="Value to print when the key is not defined"),
) -> None:
    """
    Print the value of KEY as loaded from the env files.

    Exits with status 1 when the key is not defined and no --default is given.
    """
    store = load_files(ctx, files)
    value = store.get(key)
    if value is None:
        if default is None:
            typer.echo(f"Key not found: {key}", err=True)
            raise typer.Exit(1)
        value = default
    typer.echo(value)
