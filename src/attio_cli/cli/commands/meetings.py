"""
Meeting commands (beta API).

Meetings page with cursors: ``--cursor`` resumes from a previous page and
``--all`` follows ``next_cursor`` to the end.
"""

from __future__ import annotations

from typing import Annotated, Any

import typer

from attio_cli.cli.utils import get_client, render_list, render_single
from attio_cli.cli.utils.options import DEFAULT_CURSOR_LIMIT, AllPagesOption, CursorOption, LimitOption
from attio_cli.services.meetings import MeetingService

app = typer.Typer(help="Manage meetings (beta API)")

MEETING_COLUMNS = ["id", "title", "start", "end", "is_all_day", "participants"]


def _get_service(ctx: typer.Context) -> MeetingService:
    """Get meeting service."""
    return MeetingService(get_client(ctx))


def _moment(value: Any) -> str:
    # Start/end arrive either as a timestamp or as {"datetime": ..., "timezone": ...}
    if isinstance(value, dict):
        return value.get("datetime") or value.get("date") or ""
    return value or ""


def _flatten_meeting(meeting: dict[str, Any]) -> dict[str, Any]:
    participants = meeting.get("participants")
    return {
        "id": (meeting.get("id") or {}).get("meeting_id", ""),
        "title": meeting.get("title") or "",
        "start": _moment(meeting.get("start")),
        "end": _moment(meeting.get("end")),
        "is_all_day": bool(meeting.get("is_all_day")),
        "participants": len(participants) if isinstance(participants, list) else 0,
    }


@app.command("list")
def list_meetings(
    ctx: typer.Context,
    limit: LimitOption = DEFAULT_CURSOR_LIMIT,
    cursor: CursorOption = None,
    all_pages: AllPagesOption = False,
    linked_object: Annotated[
        str | None, typer.Option("--linked-object", help="Linked object slug or ID")
    ] = None,
    linked_record_id: Annotated[
        str | None, typer.Option("--linked-record-id", help="Linked record ID (requires --linked-object)")
    ] = None,
    participants: Annotated[
        str | None, typer.Option("--participants", help="Comma-separated participant emails")
    ] = None,
    sort: Annotated[str | None, typer.Option("--sort", help="Sort order (e.g. start_asc, start_desc)")] = None,
    ends_from: Annotated[
        str | None, typer.Option("--ends-from", help="Only meetings ending after this ISO timestamp")
    ] = None,
    starts_before: Annotated[
        str | None, typer.Option("--starts-before", help="Only meetings starting before this ISO timestamp")
    ] = None,
    timezone: Annotated[
        str | None, typer.Option("--timezone", help="Timezone for the date filters (default UTC)")
    ] = None,
) -> None:
    """List meetings."""
    meetings = _get_service(ctx).list_meetings(
        limit=limit,
        cursor=cursor,
        all_pages=all_pages,
        linked_object=linked_object,
        linked_record_id=linked_record_id,
        participants=participants,
        sort=sort,
        ends_from=ends_from,
        starts_before=starts_before,
        timezone=timezone,
    )
    render_list(ctx, meetings, _flatten_meeting, columns=MEETING_COLUMNS)


@app.command("get")
def get_meeting(
    ctx: typer.Context,
    meeting_id: Annotated[str, typer.Argument(help="Meeting ID")],
) -> None:
    """Get a meeting by ID."""
    render_single(ctx, _get_service(ctx).get(meeting_id), _flatten_meeting)
