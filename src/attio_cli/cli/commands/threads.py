"""
Comment thread commands.
"""

from __future__ import annotations

from typing import Annotated, Any

import typer

from attio_cli.cli.commands.comments import thread_id_of
from attio_cli.cli.utils import get_client, render_list, render_single
from attio_cli.cli.utils.options import DEFAULT_LIMIT, LimitOption, OffsetOption
from attio_cli.services.comments import ThreadService

app = typer.Typer(help="Manage comment threads")

THREAD_COLUMNS = ["id", "object", "record_id", "list", "entry_id", "comments", "created_at"]


def _get_service(ctx: typer.Context) -> ThreadService:
    """Get thread service."""
    return ThreadService(get_client(ctx))


def _flatten_thread(thread: dict[str, Any]) -> dict[str, Any]:
    record = thread.get("record") or {}
    entry = thread.get("entry") or {}
    comments = thread.get("comments")
    return {
        "id": thread_id_of(thread),
        "object": record.get("object") or "",
        "record_id": record.get("record_id") or "",
        "list": entry.get("list") or "",
        "entry_id": entry.get("entry_id") or "",
        "comments": len(comments) if isinstance(comments, list) else 0,
        "created_at": thread.get("created_at") or "",
    }


@app.command("list")
def list_threads(
    ctx: typer.Context,
    object: Annotated[str | None, typer.Option("--object", help="Object slug (requires --record)")] = None,
    record: Annotated[str | None, typer.Option("--record", help="Record ID (requires --object)")] = None,
    list: Annotated[str | None, typer.Option("--list", help="List slug or ID (requires --entry)")] = None,
    entry: Annotated[str | None, typer.Option("--entry", help="Entry ID (requires --list)")] = None,
    limit: LimitOption = DEFAULT_LIMIT,
    offset: OffsetOption = 0,
) -> None:
    """List comment threads on a record or list entry."""
    threads = _get_service(ctx).list_threads(
        limit=limit,
        offset=offset,
        object=object,
        record_id=record,
        list=list,
        entry_id=entry,
    )
    render_list(ctx, threads, _flatten_thread, columns=THREAD_COLUMNS)


@app.command("get")
def get_thread(
    ctx: typer.Context,
    thread_id: Annotated[str, typer.Argument(help="Thread ID")],
) -> None:
    """Get a thread by ID."""
    render_single(ctx, _get_service(ctx).get(thread_id), _flatten_thread)
