"""
Call recording commands (beta API).
"""

from __future__ import annotations

from typing import Annotated, Any

import typer

from attio_cli.cli.utils import get_client, render_list, render_single
from attio_cli.cli.utils.options import DEFAULT_CURSOR_LIMIT, AllPagesOption, CursorOption, LimitOption
from attio_cli.services.meetings import RecordingService

app = typer.Typer(help="Manage call recordings (beta API)")

MeetingOption = Annotated[str, typer.Option("--meeting", help="Meeting ID")]

RECORDING_COLUMNS = ["id", "meeting_id", "status", "created_at", "web_url"]


def _flatten_recording(recording: dict[str, Any]) -> dict[str, Any]:
    ident = recording.get("id") or {}
    return {
        "id": ident.get("call_recording_id", ""),
        "meeting_id": ident.get("meeting_id", ""),
        "status": recording.get("status") or "",
        "created_at": recording.get("created_at") or "",
        "web_url": recording.get("web_url") or "",
    }


@app.command("list")
def list_recordings(
    ctx: typer.Context,
    meeting: MeetingOption,
    limit: LimitOption = DEFAULT_CURSOR_LIMIT,
    cursor: CursorOption = None,
    all_pages: AllPagesOption = False,
) -> None:
    """List call recordings for a meeting."""
    recordings = RecordingService(get_client(ctx), meeting).list_recordings(
        limit=limit,
        cursor=cursor,
        all_pages=all_pages,
    )
    render_list(ctx, recordings, _flatten_recording, columns=RECORDING_COLUMNS)


@app.command("get")
def get_recording(
    ctx: typer.Context,
    recording_id: Annotated[str, typer.Argument(help="Call recording ID")],
    meeting: MeetingOption,
    transcript: Annotated[bool, typer.Option("--transcript", help="Include the transcript")] = False,
    cursor: Annotated[str | None, typer.Option("--cursor", help="Transcript pagination cursor")] = None,
    all_transcript: Annotated[
        bool, typer.Option("--all-transcript", help="Fetch every transcript page (with --transcript)")
    ] = False,
) -> None:
    """Get a call recording, optionally with its transcript."""
    svc = RecordingService(get_client(ctx), meeting)
    recording = svc.get(recording_id) or {}
    if transcript:
        recording["transcript"] = svc.transcript(recording_id, cursor=cursor, all_pages=all_transcript)
    render_single(ctx, recording, _flatten_recording)
