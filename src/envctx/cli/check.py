"""
envctx check - Report lines that will not load the way they look.
"""

from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from envctx.cli.common import DEFAULT_ENV_FILE, FILES_OPTION_HELP, get_settings
from envctx.core.loader import create_store, iter_lines, load_line
from envctx.core.resolver import find_unterminated, placeholders
from envctx.core.store import ContextStore
from envctx.exceptions import EnvctxError, MalformedLineError

console = Console()


@dataclass
class Issue:
    path: Path
    line: int
    message: str


def inspect_file(path: Path, store: ContextStore, max_line_length: int) -> list[Issue]:
    """
    Load one file into ``store`` the way the loader would, collecting issues.

    Reported: malformed lines, lines split because they exceed the read
    size, placeholders with no definition at their point of use (undefined
    or defined further down), and placeholders missing a closing brace.
    """
    issues: list[Issue] = []
    store.init()
    for line_number, fragment, continued in iter_lines(path, max_line_length):
        if continued:
            issues.append(Issue(path, line_number, f"line longer than {max_line_length - 1} characters is split"))

        def inspect_value(key: str, value: str) -> None:
            for name in placeholders(value):
                if store.get(name) is None:
                    issues.append(Issue(path, line_number, f"${{{name}}} in '{key}' is not defined before this line"))
            if find_unterminated(value) != -1:
                issues.append(
                    Issue(path, line_number, f"unterminated placeholder in '{key}', rest of value is dropped")
                )

        try:
            load_line(fragment, store, before_append=inspect_value)
        except MalformedLineError as e:
            issues.append(Issue(path, line_number, e.reason))
    return issues


def check(
    ctx: typer.Context,
    files: list[Path] | None = typer.Option(None, "--file", "-f", help=FILES_OPTION_HELP),
) -> None:
    """
    Check env files for malformed lines and unresolved placeholders.

    Exits with status 1 when any issue is found.
    """
    settings = get_settings(ctx)
    store = create_store(settings)
    issues: list[Issue] = []
    try:
        for path in files or [DEFAULT_ENV_FILE]:
            issues.extend(inspect_file(path, store, settings.max_line_length))
    except EnvctxError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    if not issues:
        console.print(f"[green]OK[/green] {store.count} entries, no issues")
        return

    for issue in issues:
        console.print(
            f"[yellow]{escape(str(issue.path))}:{issue.line}[/yellow] {escape(issue.message)}",
            highlight=False,
            soft_wrap=True,
        )
    console.print(f"\n[red]{len(issues)} issue(s) found[/red]")
    raise typer.Exit(1)
