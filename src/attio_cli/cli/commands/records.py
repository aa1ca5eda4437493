"""
Record management commands.

Provides CRUD, assert, search and history commands for records of any
Attio object. The ``*_action`` functions are shared with the per-object
shortcut groups (people, companies, ...).
"""

from __future__ import annotations

from typing import Annotated, Any

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
from attio_cli.services.records import RecordService, search_records
from attio_cli.utils.filters import build_filter, build_sorts
from attio_cli.utils.flatten import flatten_record, flatten_single_value
from attio_cli.utils.values import require_values, resolve_values

app = typer.Typer(help="Manage records in any Attio object")

ObjectArgument = Annotated[str, typer.Argument(help="Object slug or ID (e.g. companies, people)")]
RecordIdArgument = Annotated[str, typer.Argument(help="Record ID")]
MatchOption = Annotated[str, typer.Option("--match", help="Attribute slug to match on")]


def _get_service(ctx: typer.Context, object: str) -> RecordService:
    """Get record service for an object."""
    return RecordService(get_client(ctx), object)


def _flatten_attribute_value(value: dict[str, Any]) -> dict[str, str]:
    actor = value.get("created_by_actor") or {}
    return {
        "value": flatten_single_value(value),
        "attribute_type": value.get("attribute_type") or "",
        "active_from": value.get("active_from") or "",
        "active_until": value.get("active_until") or "",
        "created_by": f"{actor.get('type', '')}:{actor.get('id', '')}" if actor else "",
    }


def _flatten_record_entry(entry: dict[str, Any]) -> dict[str, str]:
    return {
        "entry_id": entry.get("entry_id") or "",
        "list": entry.get("list_api_slug") or entry.get("list_id") or "",
        "created_at": entry.get("created_at") or "",
    }


# ---------------------------------------------------------------------------
# Actions shared with the shortcut groups
# ---------------------------------------------------------------------------


def list_records_action(
    ctx: typer.Context,
    object: str,
    filters: list[str] | None = None,
    filter_json: str | None = None,
    sorts: list[str] | None = None,
    limit: int = DEFAULT_LIMIT,
    offset: int = 0,
    all_pages: bool = False,
) -> None:
    """Query records and render them."""
    filter = build_filter(filters, filter_json)
    sort_specs = build_sorts(sorts)
    records = _get_service(ctx, object).list_records(
        filter=filter,
        sorts=sort_specs,
        limit=limit,
        offset=offset,
        all_pages=all_pages,
    )
    render_list(ctx, records, flatten_record)


def get_record_action(ctx: typer.Context, object: str, record_id: str) -> None:
    """Fetch one record and render it."""
    render_single(ctx, _get_service(ctx, object).get(record_id), flatten_record)


def create_record_action(
    ctx: typer.Context,
    object: str,
    values: str | None = None,
    sets: list[str] | None = None,
) -> None:
    """Create a record from --values, --set or stdin."""
    resolved = require_values(resolve_values(values=values, sets=sets))
    render_single(ctx, _get_service(ctx, object).create(resolved), flatten_record)


def update_record_action(
    ctx: typer.Context,
    object: str,
    record_id: str,
    values: str | None = None,
    sets: list[str] | None = None,
) -> None:
    """Update a record from --values, --set or stdin."""
    resolved = require_values(resolve_values(values=values, sets=sets))
    render_single(ctx, _get_service(ctx, object).update(record_id, resolved), flatten_record)


def delete_record_action(ctx: typer.Context, object: str, record_id: str, yes: bool = False) -> None:
    """Delete a record after confirmation."""
    if not confirm_action(f"Delete record {record_id} from {object}?", yes):
        return
    _get_service(ctx, object).delete(record_id)
    print_success("Deleted.")


def assert_record_action(
    ctx: typer.Context,
    object: str,
    match: str,
    values: str | None = None,
    sets: list[str] | None = None,
) -> None:
    """Create or update a record matched on a unique attribute."""
    resolved = require_values(resolve_values(values=values, sets=sets))
    render_single(ctx, _get_service(ctx, object).assert_record(match, resolved), flatten_record)


def search_records_action(
    ctx: typer.Context,
    query: str,
    objects: list[str],
    limit: int = DEFAULT_LIMIT,
) -> None:
    """Full-text search across objects and render the matches."""
    render_list(ctx, search_records(get_client(ctx), query, objects, limit), flatten_record)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command("list")
def list_records(
    ctx: typer.Context,
    object: ObjectArgument,
    filter: FilterOption = None,
    filter_json: FilterJsonOption = None,
    sort: SortOption = None,
    limit: LimitOption = DEFAULT_LIMIT,
    offset: OffsetOption = 0,
    all_pages: AllPagesOption = False,
) -> None:
    """List or query records for an object."""
    list_records_action(ctx, object, filter, filter_json, sort, limit, offset, all_pages)


@app.command("get")
def get_record(ctx: typer.Context, object: ObjectArgument, record_id: RecordIdArgument) -> None:
    """Get a single record by ID."""
    get_record_action(ctx, object, record_id)


@app.command("create")
def create_record(
    ctx: typer.Context,
    object: ObjectArgument,
    values: ValuesOption = None,
    sets: SetOption = None,
) -> None:
    """Create a new record."""
    create_record_action(ctx, object, values, sets)


@app.command("update")
def update_record(
    ctx: typer.Context,
    object: ObjectArgument,
    record_id: RecordIdArgument,
    values: ValuesOption = None,
    sets: SetOption = None,
) -> None:
    """Update an existing record."""
    update_record_action(ctx, object, record_id, values, sets)


@app.command("delete")
def delete_record(
    ctx: typer.Context,
    object: ObjectArgument,
    record_id: RecordIdArgument,
    yes: YesOption = False,
) -> None:
    """Delete a record."""
    delete_record_action(ctx, object, record_id, yes)


@app.command("assert")
def assert_record(
    ctx: typer.Context,
    object: ObjectArgument,
    match: MatchOption,
    values: ValuesOption = None,
    sets: SetOption = None,
) -> None:
    """Create or update a record by matching attribute."""
    assert_record_action(ctx, object, match, values, sets)


@app.command("upsert")
def upsert_record(
    ctx: typer.Context,
    object: ObjectArgument,
    match: MatchOption,
    values: ValuesOption = None,
    sets: SetOption = None,
) -> None:
    """Create or update a record by matching attribute (alias of assert)."""
    assert_record_action(ctx, object, match, values, sets)


@app.command("search")
def search(
    ctx: typer.Context,
    query: Annotated[str, typer.Argument(help="Search query string")],
    object: Annotated[
        list[str] | None,
        typer.Option("--object", "-o", help="Object slug to search (repeatable)"),
    ] = None,
    limit: LimitOption = DEFAULT_LIMIT,
) -> None:
    """Full-text search for records across one or more objects."""
    search_records_action(ctx, query, object or [], limit)


@app.command("values")
def attribute_values(
    ctx: typer.Context,
    object: ObjectArgument,
    record_id: RecordIdArgument,
    attribute: Annotated[str, typer.Option("--attribute", "-a", help="Attribute slug or ID")],
    historic: Annotated[
        bool,
        typer.Option("--historic/--no-historic", help="Include values that are no longer active"),
    ] = True,
) -> None:
    """Show an attribute's values on a record, including history."""
    values = _get_service(ctx, object).attribute_values(record_id, attribute, show_historic=historic)
    render_list(
        ctx,
        values,
        _flatten_attribute_value,
        columns=["value", "attribute_type", "active_from", "active_until", "created_by"],
    )


@app.command("entries")
def record_entries(
    ctx: typer.Context,
    object: ObjectArgument,
    record_id: RecordIdArgument,
    limit: LimitOption = DEFAULT_LIMIT,
    offset: OffsetOption = 0,
) -> None:
    """List the list entries that reference a record."""
    entries = _get_service(ctx, object).entries(record_id, limit=limit, offset=offset)
    render_list(
        ctx,
        entries,
        _flatten_record_entry,
        columns=["entry_id", "list", "created_at"],
        id_field="entry_id",
    )
