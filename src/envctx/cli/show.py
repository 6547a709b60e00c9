"""
envctx show - Display loaded entries.
"""

import json
from enum import Enum
from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

from envctx.cli.common import FILES_OPTION_HELP, load_files
from envctx.core.parsing import QUOTE

console = Console()


class OutputFormat(str, Enum):
    table = "table"
    json = "json"
    yaml = "yaml"
    dotenv = "dotenv"


def show(
    ctx: typer.Context,
    files: list[Path] | None = typer.Option(None, "--file", "-f", help=FILES_OPTION_HELP),
    output_format: OutputFormat = typer.Option(OutputFormat.table, "--format", help="Output format"),
    show_all: bool = typer.Option(False, "--all", "-a", help="Include shadowed duplicate keys"),
) -> None:
    """
    Display the entries loaded from the env files.

    By default only the value each key resolves to (its first definition) is
    shown; --all lists every entry in load order.

    The dotenv format has no escapes: a value containing a double quote
    cannot be written so that it loads back unchanged, and a warning is
    printed for each such key.
    """
    store = load_files(ctx, files)

    if show_all:
        seen: set[str] = set()
        rows = []
        for entry in store.entries():
            rows.append((entry.key, entry.value, entry.key in seen))
            seen.add(entry.key)
    else:
        rows = [(key, value, False) for key, value in store.as_dict().items()]

    if output_format is OutputFormat.json:
        if show_all:
            payload = [{"key": k, "value": v, "shadowed": s} for k, v, s in rows]
            typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        else:
            typer.echo(json.dumps({k: v for k, v, _ in rows}, indent=2, ensure_ascii=False))
    elif output_format is OutputFormat.yaml:
        if show_all:
            payload = [{"key": k, "value": v, "shadowed": s} for k, v, s in rows]
        else:
            payload = {k: v for k, v, _ in rows}
        typer.echo(yaml.safe_dump(payload, sort_keys=False, allow_unicode=True), nl=False)
    elif output_format is OutputFormat.dotenv:
        for key, value, shadowed in rows:
            if QUOTE in value:
                typer.echo(
                    f"Warning: value of '{key}' contains a double quote and will not load back unchanged",
                    err=True,
                )
            prefix = "# " if shadowed else ""
            typer.echo(f'{prefix}{key}="{value}"')
    else:
        if not rows:
            console.print("[yellow]No entries loaded[/yellow]")
            return
        table = Table(show_header=True, header_style="bold")
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Value", overflow="fold")
        if show_all:
            table.add_column("Shadowed", justify="center")
        for key, value, shadowed in rows:
            cells = [Text(key), Text(value)]
            if show_all:
                cells.append(Text("yes" if shadowed else ""))
            table.add_row(*cells)
        console.print(table)
