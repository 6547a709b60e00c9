"""
envctx run - Run a command with the loaded entries in its environment.
"""

import os
import subprocess
from pathlib import Path

import typer

from envctx.cli.common import FILES_OPTION_HELP, load_files
from envctx.core.environ import apply_to_environ
from envctx.utils.logging import get_logger

logger = get_logger("envctx.cli.run")


def run(
    ctx: typer.Context,
    files: list[Path] | None = typer.Option(None, "--file", "-f", help=FILES_OPTION_HELP),
    override: bool = typer.Option(False, "--override", help="Let loaded entries replace variables already set"),
) -> None:
    """
    Run a command with the env files applied to its environment.

    Usage: envctx run [-f FILE]... [--override] -- COMMAND [ARGS]...
    """
    command = list(ctx.args)
    if not command:
        typer.echo("Error: no command given (usage: envctx run [OPTIONS] -- COMMAND [ARGS]...)", err=True)
        raise typer.Exit(2)

    store = load_files(ctx, files)
    env = dict(os.environ)
    written = apply_to_environ(store, env, override=override)
    logger.info(f"Running {command[0]} with {len(written)} variables from env files")

    try:
        completed = subprocess.run(command, env=env, check=False)
    except FileNotFoundError as e:
        typer.echo(f"Error: command not found: {command[0]}", err=True)
        raise typer.Exit(127) from e
    except PermissionError as e:
        typer.echo(f"Error: permission denied: {command[0]}", err=True)
        raise typer.Exit(126) from e
    raise typer.Exit(completed.returncode)
