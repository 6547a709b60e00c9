"""
Helpers shared by the CLI commands.
"""

from pathlib import Path

import typer

from envctx.config.loader import Settings
from envctx.core.loader import create_store, load_many
from envctx.core.store import ContextStore
from envctx.exceptions import EnvctxError
from envctx.utils.logging import get_logger

logger = get_logger("envctx.cli")

DEFAULT_ENV_FILE = Path(".env")

FILES_OPTION_HELP = "Env file to load (repeatable, earlier files win)"


def get_settings(ctx: typer.Context) -> Settings:
    """Settings loaded by the top-level callback, or defaults."""
    settings = ctx.obj.get("settings") if isinstance(ctx.obj, dict) else None
    return settings or Settings()


def load_files(ctx: typer.Context, files: list[Path] | None) -> ContextStore:
    """Load the given env files into a fresh store, exiting with status 1 on failure."""
    settings = get_settings(ctx)
    store = create_store(settings)
    try:
        load_many(files or [DEFAULT_ENV_FILE], store, settings)
    except EnvctxError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    return store
