"""
Output rendering for CLI commands.

Renders API results as a rich table, JSON, CSV, or bare IDs. The format
is chosen from the global flags, falling back to a table on a terminal
and JSON when stdout is piped.
"""

from __future__ import annotations

import csv
import io
import json
import sys
from enum import Enum
from typing import Any, TextIO

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

# Default consoles: results to stdout, status and errors to stderr
_console = Console()
err_console = Console(stderr=True)

MAX_TABLE_COLUMNS = 8
LIST_CELL_WIDTH = 60
SINGLE_CELL_WIDTH = 80

# Resource-specific ID keys win over container IDs such as workspace_id
PREFERRED_ID_KEYS = (
    "record_id",
    "entry_id",
    "task_id",
    "note_id",
    "comment_id",
    "thread_id",
    "webhook_id",
    "call_recording_id",
    "meeting_id",
    "workspace_member_id",
    "attribute_id",
    "list_id",
    "object_id",
)


class OutputFormat(str, Enum):
    """Supported output formats."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"
    QUIET = "quiet"


def detect_format(
    json: bool = False,
    table: bool = False,
    csv: bool = False,
    quiet: bool = False,
    stream: TextIO | None = None,
) -> OutputFormat:
    """
    Pick the output format from flags.

    Precedence is quiet, json, csv, table; with no flag a terminal gets a
    table and anything else gets JSON.
    """
    if quiet:
        return OutputFormat.QUIET
    if json:
        return OutputFormat.JSON
    if csv:
        return OutputFormat.CSV
    if table:
        return OutputFormat.TABLE
    stream = stream if stream is not None else sys.stdout
    return OutputFormat.TABLE if stream.isatty() else OutputFormat.JSON


def truncate(value: str, max_len: int) -> str:
    """Truncate a string with ellipsis."""
    if len(value) <= max_len:
        return value
    return value[: max_len - 3] + "..."


def cell_text(value: Any) -> str:
    """Render a value for a table or CSV cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def extract_output_id(value: Any) -> str:
    """
    Resolve the ID to print in quiet mode.

    Attio IDs are objects such as {"workspace_id": ..., "task_id": ...};
    the resource-specific key is preferred over workspace_id.
    """
    if value is None:
        return ""
    if not isinstance(value, dict):
        return cell_text(value)
    for key in PREFERRED_ID_KEYS:
        if value.get(key):
            return cell_text(value[key])
    for key, nested in value.items():
        if key != "workspace_id" and nested:
            return cell_text(nested)
    return cell_text(value.get("workspace_id"))


def _item_id(item: Any, id_field: str) -> str:
    if isinstance(item, dict):
        return extract_output_id(item.get(id_field))
    return cell_text(item)


def print_json(data: Any, console: Console | None = None) -> None:
    """Print data as indented JSON."""
    console = console or _console
    console.print_json(json.dumps(data, default=str))


def _write_csv(rows: list[dict[str, Any]], columns: list[str]) -> None:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(columns)
    for row in rows:
        writer.writerow([cell_text(row.get(c)) for c in columns])
    typer.echo(buffer.getvalue(), nl=False)


def output_list(
    items: list[Any],
    fmt: OutputFormat,
    columns: list[str] | None = None,
    id_field: str = "id",
    title: str | None = None,
    console: Console | None = None,
) -> None:
    """
    Render a list of items.

    Args:
        items: Raw items (JSON) or flattened rows (table/CSV)
        fmt: Output format
        columns: Columns to show; defaults to the first item's first keys
        id_field: Key holding the ID printed in quiet mode
        title: Optional table title
        console: Console for table/JSON output
    """
    console = console or _console

    if fmt == OutputFormat.QUIET:
        for item in items:
            ident = _item_id(item, id_field)
            if ident:
                typer.echo(ident)
        return

    if fmt == OutputFormat.JSON:
        print_json(items, console)
        return

    if not items:
        if fmt == OutputFormat.TABLE:
            console.print("[dim]No results.[/dim]")
        return

    columns = columns or list(items[0].keys())[:MAX_TABLE_COLUMNS]

    if fmt == OutputFormat.CSV:
        _write_csv(items, columns)
        return

    table = Table(title=title)
    for column in columns:
        table.add_column(column, style="cyan" if column == columns[0] else None, overflow="fold")
    for item in items:
        table.add_row(*(Text(truncate(cell_text(item.get(c)), LIST_CELL_WIDTH)) for c in columns))
    console.print(table)


def output_single(
    item: dict[str, Any],
    fmt: OutputFormat,
    id_field: str = "id",
    console: Console | None = None,
) -> None:
    """
    Render a single item.

    Tables show one key/value row per field; CSV shows a one-row sheet.
    """
    console = console or _console

    if fmt == OutputFormat.QUIET:
        typer.echo(_item_id(item, id_field))
        return

    if fmt == OutputFormat.JSON:
        print_json(item, console)
        return

    if fmt == OutputFormat.CSV:
        _write_csv([item], list(item.keys()))
        return

    table = Table(show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for key, value in item.items():
        table.add_row(Text(key), Text(truncate(cell_text(value), SINGLE_CELL_WIDTH)))
    console.print(table)


def confirm_action(message: str, yes: bool = False) -> bool:
    """
    Ask for confirmation on stderr unless --yes was given.

    Returns:
        True when the action should go ahead
    """
    if yes:
        return True
    if typer.confirm(message, default=False, err=True):
        return True
    err_console.print("Aborted.")
    return False


def print_success(message: str) -> None:
    """Print a status message to stderr."""
    err_console.print(f"[green]{message}[/green]")
