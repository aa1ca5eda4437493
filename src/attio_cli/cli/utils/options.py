"""
Reusable option declarations for CLI commands.

Commands share these so the same flag has the same name, default and
help text everywhere.
"""

from __future__ import annotations

from typing import Annotated

import typer

from attio_cli.constants import PaginationConfig

FilterOption = Annotated[
    list[str] | None,
    typer.Option(
        "--filter",
        "-f",
        help='Filter: = != ~ !~ ^ > >= < <= ? (e.g. "name~Acme"). Repeatable, combined with AND',
    ),
]
FilterJsonOption = Annotated[
    str | None,
    typer.Option("--filter-json", help="Raw JSON filter (overrides --filter)"),
]
SortOption = Annotated[
    list[str] | None,
    typer.Option("--sort", "-s", help='Sort: attribute[.field][:asc|desc] (e.g. "name.last_name:desc"). Repeatable'),
]
LimitOption = Annotated[
    int,
    typer.Option("--limit", "-n", min=1, help="Maximum results per page"),
]
OffsetOption = Annotated[
    int,
    typer.Option("--offset", min=0, help="Number of results to skip"),
]
AllPagesOption = Annotated[
    bool,
    typer.Option("--all", help="Fetch all pages"),
]
CursorOption = Annotated[
    str | None,
    typer.Option("--cursor", help="Pagination cursor"),
]
ValuesOption = Annotated[
    str | None,
    typer.Option("--values", help="Values as JSON string or @file"),
]
SetOption = Annotated[
    list[str] | None,
    typer.Option("--set", help="Set a field value as key=value (repeatable)"),
]
YesOption = Annotated[
    bool,
    typer.Option("--yes", "-y", help="Skip confirmation prompt"),
]

DEFAULT_LIMIT = PaginationConfig.DEFAULT_LIMIT
DEFAULT_CURSOR_LIMIT = PaginationConfig.DEFAULT_CURSOR_LIMIT
