"""
List entry commands.

Entries place a record on a list. Creating or asserting an entry may
carry no list values at all; updates need at least one.
"""

from __future__ import annotations

from typing import Annotated

import typer

from attio_cli.cli.utils import get_client, render_list, render_single
from attio_cli.cli.utils.options import (
    DEFAULT_LIMIT,
    AllPagesOption,
    FilterJsonOption,
    FilterOption,
    LimitOption,
    OffsetOption,
    SetOption,
    SortOption,
    ValuesOption,
    YesOption,
)
from attio_cli.formatters.output import confirm_action, print_success
from attio_cli.services.entries import EntryService
from attio_cli.utils.filters import build_filter, build_sorts
from attio_cli.utils.flatten import flatten_entry
from attio_cli.utils.values import require_values, resolve_values

app = typer.Typer(help="Manage list entries")

ListArgument = Annotated[str, typer.Argument(help="List slug or ID")]
EntryIdArgument = Annotated[str, typer.Argument(help="Entry ID")]
ParentRecordOption = Annotated[str, typer.Option("--record", help="Parent record ID")]
ParentObjectOption = Annotated[str, typer.Option("--object", help="Parent object slug")]


def _get_service(ctx: typer.Context, list: str) -> EntryService:
    """Get entry service for a list."""
    return EntryService(get_client(ctx), list)


@app.command("list")
def list_entries(
    ctx: typer.Context,
    list: ListArgument,
    filter: FilterOption = None,
    filter_json: FilterJsonOption = None,
    sort: SortOption = None,
    limit: LimitOption = DEFAULT_LIMIT,
    offset: OffsetOption = 0,
    all_pages: AllPagesOption = False,
) -> None:
    """List entries in a list."""
    entries = _get_service(ctx, list).list_entries(
        filter=build_filter(filter, filter_json),
        sorts=build_sorts(sort),
        limit=limit,
        offset=offset,
        all_pages=all_pages,
    )
    render_list(ctx, entries, flatten_entry)


@app.command("get")
def get_entry(ctx: typer.Context, list: ListArgument, entry_id: EntryIdArgument) -> None:
    """Get an entry by ID."""
    render_single(ctx, _get_service(ctx, list).get(entry_id), flatten_entry)


@app.command("create")
def create_entry(
    ctx: typer.Context,
    list: ListArgument,
    record: ParentRecordOption,
    object: ParentObjectOption,
    values: ValuesOption = None,
    sets: SetOption = None,
) -> None:
    """Add a record to a list."""
    entry_values = resolve_values(values=values, sets=sets)
    entry = _get_service(ctx, list).create(record, object, entry_values)
    render_single(ctx, entry, flatten_entry)


@app.command("assert")
def assert_entry(
    ctx: typer.Context,
    list: ListArgument,
    record: ParentRecordOption,
    object: ParentObjectOption,
    values: ValuesOption = None,
    sets: SetOption = None,
) -> None:
    """Create an entry for a record, or update the record's existing entry."""
    entry_values = resolve_values(values=values, sets=sets)
    entry = _get_service(ctx, list).assert_entry(record, object, entry_values)
    render_single(ctx, entry, flatten_entry)


@app.command("update")
def update_entry(
    ctx: typer.Context,
    list: ListArgument,
    entry_id: EntryIdArgument,
    values: ValuesOption = None,
    sets: SetOption = None,
) -> None:
    """Update an entry's values."""
    entry_values = require_values(resolve_values(values=values, sets=sets))
    render_single(ctx, _get_service(ctx, list).update(entry_id, entry_values), flatten_entry)


@app.command("delete")
def delete_entry(
    ctx: typer.Context,
    list: ListArgument,
    entry_id: EntryIdArgument,
    yes: YesOption = False,
) -> None:
    """Remove an entry from a list."""
    if not confirm_action(f"Delete entry {entry_id} from list {list}?", yes):
        return
    _get_service(ctx, list).delete(entry_id)
    print_success(f"Deleted entry {entry_id}.")
