"""
Shortcut command groups for the standard Attio objects.

``attio people list`` is the same as ``attio records list people``. Each
group is built by :func:`build_object_app` from the shared record actions.
"""

from __future__ import annotations

from typing import Annotated

import typer

from attio_cli.cli.commands.records import (
    MatchOption,
    assert_record_action,
    create_record_action,
    delete_record_action,
    get_record_action,
    list_records_action,
    search_records_action,
    update_record_action,
)
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
from attio_cli.constants import STANDARD_OBJECTS

RecordIdArgument = Annotated[str, typer.Argument(help="Record ID")]


def build_object_app(object: str, noun: str) -> typer.Typer:
    """
    Build the shortcut command group for one object.

    Args:
        object: Object slug the commands operate on (e.g. "people")
        noun: Singular noun used in help text (e.g. "person")

    Returns:
        Typer app with list, get, create, update, delete, assert and search
    """
    app = typer.Typer(help=f"Manage {object} records (shortcut for: records <cmd> {object})")

    @app.command("list", help=f"List {object}.")
    def list_cmd(
        ctx: typer.Context,
        filter: FilterOption = None,
        filter_json: FilterJsonOption = None,
        sort: SortOption = None,
        limit: LimitOption = DEFAULT_LIMIT,
        offset: OffsetOption = 0,
        all_pages: AllPagesOption = False,
    ) -> None:
        list_records_action(ctx, object, filter, filter_json, sort, limit, offset, all_pages)

    @app.command("get", help=f"Get a {noun} by record ID.")
    def get_cmd(ctx: typer.Context, record_id: RecordIdArgument) -> None:
        get_record_action(ctx, object, record_id)

    @app.command("create", help=f"Create a {noun}.")
    def create_cmd(ctx: typer.Context, values: ValuesOption = None, sets: SetOption = None) -> None:
        create_record_action(ctx, object, values, sets)

    @app.command("update", help=f"Update a {noun}.")
    def update_cmd(
        ctx: typer.Context,
        record_id: RecordIdArgument,
        values: ValuesOption = None,
        sets: SetOption = None,
    ) -> None:
        update_record_action(ctx, object, record_id, values, sets)

    @app.command("delete", help=f"Delete a {noun}.")
    def delete_cmd(ctx: typer.Context, record_id: RecordIdArgument, yes: YesOption = False) -> None:
        delete_record_action(ctx, object, record_id, yes)

    @app.command("assert", help=f"Create or update a {noun} by matching attribute.")
    def assert_cmd(
        ctx: typer.Context,
        match: MatchOption,
        values: ValuesOption = None,
        sets: SetOption = None,
    ) -> None:
        assert_record_action(ctx, object, match, values, sets)

    @app.command("search", help=f"Search {object} by text.")
    def search_cmd(
        ctx: typer.Context,
        query: Annotated[str, typer.Argument(help="Search query string")],
        limit: LimitOption = DEFAULT_LIMIT,
    ) -> None:
        search_records_action(ctx, query, [object], limit)

    return app


SHORTCUT_APPS: dict[str, typer.Typer] = {
    object: build_object_app(object, noun) for object, noun in STANDARD_OBJECTS
}
