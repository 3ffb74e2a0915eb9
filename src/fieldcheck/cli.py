"""CLI interface for fieldcheck using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from fieldcheck import __description__, __version__
from fieldcheck.config import LogLevel, load_config
from fieldcheck.engine import parse_rules, validate_syntax
from fieldcheck.errors import InvalidValidatorSyntaxError, MalformedClauseError
from fieldcheck.models import Predicate

app = typer.Typer(
    name="fieldcheck",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


def _setup_logging(level: str) -> None:
    try:
        log_level = LogLevel(level)
    except ValueError:
        log_level = LogLevel.WARN
    logging.basicConfig(
        level=LOG_LEVELS[log_level],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"fieldcheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """fieldcheck - declarative field validation for dataclasses and pydantic models."""


def lint_rules(rules: str) -> list[dict[str, Any]]:
    """Check every clause of a rule string without evaluating any value."""
    rows = []
    for index, item in enumerate(parse_rules(rules), start=1):
        if isinstance(item, MalformedClauseError):
            rows.append({
                "index": index,
                "predicate": None,
                "argument": None,
                "status": "malformed",
            })
            continue

        status = "ignored" if item.predicate == Predicate.UNKNOWN else "ok"
        try:
            validate_syntax(item.predicate, item.argument)
        except InvalidValidatorSyntaxError:
            status = "invalid syntax"
        rows.append({
            "index": index,
            "predicate": item.name,
            "argument": item.argument,
            "status": status,
        })
    return rows


def _output_lint_table(rules: str, rows: list[dict[str, Any]]) -> None:
    table = Table(title=f"Rule: {rules}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Predicate", style="cyan")
    table.add_column("Argument")
    table.add_column("Status")

    styles = {
        "ok": "green",
        "ignored": "yellow",
        "malformed": "red",
        "invalid syntax": "red",
    }
    for row in rows:
        style = styles[row["status"]]
        table.add_row(
            str(row["index"]),
            row["predicate"] or "-",
            row["argument"] if row["argument"] is not None else "-",
            f"[{style}]{row['status']}[/{style}]",
        )
    console.print(table)


@app.command()
def lint(
    rules: Annotated[
        str,
        typer.Argument(help="Rule string to check, e.g. 'min:2;max:20'")
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Configuration file path (default: search for .fieldcheck.json)")
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Override logging level: error, warn, info, debug")
    ] = None,
) -> None:
    """Check the syntax of a rule string."""
    valid_formats = ["table", "json"]
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    try:
        fieldcheck_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _setup_logging(log_level or fieldcheck_config.logging.level)

    rows = lint_rules(rules)
    failed = [row for row in rows if row["status"] in ("malformed", "invalid syntax")]

    if format == "json":
        console.print(jsonlib.dumps({
            "rules": rules,
            "valid": not failed,
            "clauses": rows,
        }, indent=2), markup=False, soft_wrap=True)
    else:
        _output_lint_table(rules, rows)
        if failed:
            console.print(f"[red]{len(failed)} of {len(rows)} clauses failed[/red]")
        else:
            console.print(f"[green]All {len(rows)} clauses are valid[/green]")

    if failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
