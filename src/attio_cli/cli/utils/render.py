"""
Rendering helpers shared by CLI commands.

JSON output and quiet mode work on the raw API payload (quiet mode needs
the nested ``id`` object); tables and CSV get the flattened rows.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import typer

from attio_cli.cli.utils.state import output_format
from attio_cli.formatters.output import OutputFormat, output_list, output_single

Flattener = Callable[[dict[str, Any]], dict[str, Any]]


def render_list(
    ctx: typer.Context,
    items: list[dict[str, Any]],
    flatten: Flattener | None = None,
    columns: list[str] | None = None,
    id_field: str = "id",
    title: str | None = None,
) -> None:
    """Render a list of API items in the current output format."""
    fmt = output_format(ctx)
    if flatten is None or fmt in (OutputFormat.JSON, OutputFormat.QUIET):
        output_list(items, fmt, columns=columns, id_field=id_field, title=title)
        return
    output_list([flatten(item) for item in items], fmt, columns=columns, id_field=id_field, title=title)


def render_single(
    ctx: typer.Context,
    item: dict[str, Any] | None,
    flatten: Flattener | None = None,
    id_field: str = "id",
) -> None:
    """Render a single API item in the current output format."""
    fmt = output_format(ctx)
    item = item or {}
    if flatten is None or fmt in (OutputFormat.JSON, OutputFormat.QUIET):
        output_single(item, fmt, id_field=id_field)
        return
    output_single(flatten(item), fmt, id_field=id_field)
