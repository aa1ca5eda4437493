"""
Note management commands.
"""

from __future__ import annotations

from typing import Annotated, Any

import typer

from attio_cli.cli.utils import get_client, render_list, render_single
from attio_cli.cli.utils.options import DEFAULT_LIMIT, LimitOption, OffsetOption, YesOption
from attio_cli.formatters.output import confirm_action, print_success
from attio_cli.services.notes import NOTE_FORMATS, NoteService

app = typer.Typer(help="Manage notes")

NoteIdArgument = Annotated[str, typer.Argument(help="Note ID")]


def _get_service(ctx: typer.Context) -> NoteService:
    """Get note service."""
    return NoteService(get_client(ctx))


def _flatten_note(note: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": (note.get("id") or {}).get("note_id", ""),
        "title": note.get("title") or "",
        "parent_object": note.get("parent_object") or "",
        "parent_record_id": note.get("parent_record_id") or "",
        "created_at": note.get("created_at") or "",
    }


@app.command("list")
def list_notes(
    ctx: typer.Context,
    object: Annotated[str | None, typer.Option("--object", help="Parent object slug")] = None,
    record: Annotated[str | None, typer.Option("--record", help="Parent record ID")] = None,
    limit: LimitOption = DEFAULT_LIMIT,
    offset: OffsetOption = 0,
) -> None:
    """List notes, optionally for one record."""
    notes = _get_service(ctx).list_notes(
        limit=limit,
        offset=offset,
        parent_object=object,
        parent_record_id=record,
    )
    render_list(
        ctx,
        notes,
        _flatten_note,
        columns=["id", "title", "parent_object", "parent_record_id", "created_at"],
    )


@app.command("get")
def get_note(ctx: typer.Context, note_id: NoteIdArgument) -> None:
    """Get a note by ID."""
    render_single(ctx, _get_service(ctx).get(note_id))


@app.command("create")
def create_note(
    ctx: typer.Context,
    object: Annotated[str, typer.Option("--object", help="Parent object slug")],
    record: Annotated[str, typer.Option("--record", help="Parent record ID")],
    title: Annotated[str, typer.Option("--title", help="Note title")],
    content: Annotated[str, typer.Option("--content", help="Note content")],
    format: Annotated[
        str,
        typer.Option("--format", help=f"Content format: {' or '.join(NOTE_FORMATS)}"),
    ] = "plaintext",
) -> None:
    """Create a note on a record."""
    note = _get_service(ctx).create_note(object, record, title, content, format=format)
    render_single(ctx, note)


@app.command("delete")
def delete_note(ctx: typer.Context, note_id: NoteIdArgument, yes: YesOption = False) -> None:
    """Delete a note."""
    if not confirm_action(f"Delete note {note_id}?", yes):
        return
    _get_service(ctx).delete(note_id)
    print_success("Deleted.")
