"""
Comment commands.

Comments live in threads; ``comments list`` shows every comment of the
threads on a record, one row per comment.
"""

from __future__ import annotations

from typing import Annotated, Any

import typer

from attio_cli.cli.utils import get_client, render_single
from attio_cli.cli.utils.options import DEFAULT_LIMIT, LimitOption, OffsetOption, YesOption
from attio_cli.cli.utils.state import output_format
from attio_cli.formatters.output import (
    LIST_CELL_WIDTH,
    OutputFormat,
    confirm_action,
    output_list,
    print_success,
    truncate,
)
from attio_cli.services.comments import CommentService, ThreadService
from attio_cli.services.workspace import WorkspaceService

app = typer.Typer(help="Manage comments on records")

COMMENT_COLUMNS = ["thread_id", "author", "content", "created_at"]


def thread_id_of(thread: dict[str, Any]) -> str:
    """Thread ID from either the nested id object or a flat thread_id."""
    ident = thread.get("id")
    if isinstance(ident, dict) and ident.get("thread_id"):
        return ident["thread_id"]
    return thread.get("thread_id") or ""


def comment_rows(threads: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """One row per comment; a thread without comments still gets a row."""
    rows = []
    for thread in threads:
        thread_id = thread_id_of(thread)
        comments = thread.get("comments")
        if isinstance(comments, list):
            for comment in comments:
                author = comment.get("author") or {}
                rows.append(
                    {
                        "thread_id": thread_id,
                        "author": author.get("id") or author.get("name") or "",
                        "content": truncate(
                            comment.get("content_plaintext") or comment.get("content") or "",
                            LIST_CELL_WIDTH,
                        ),
                        "created_at": comment.get("created_at") or "",
                    }
                )
        else:
            rows.append(
                {
                    "thread_id": thread_id,
                    "author": (thread.get("created_by_actor") or {}).get("id") or "",
                    "content": "",
                    "created_at": thread.get("created_at") or "",
                }
            )
    return rows


@app.command("list")
def list_comments(
    ctx: typer.Context,
    object: Annotated[str, typer.Option("--object", help="Object slug")],
    record: Annotated[str, typer.Option("--record", help="Record ID")],
    limit: LimitOption = DEFAULT_LIMIT,
    offset: OffsetOption = 0,
) -> None:
    """List the comments on a record."""
    threads = ThreadService(get_client(ctx)).list_threads(
        limit=limit,
        offset=offset,
        object=object,
        record_id=record,
    )
    fmt = output_format(ctx)
    if fmt == OutputFormat.QUIET:
        output_list([{"thread_id": thread_id_of(t)} for t in threads], fmt, id_field="thread_id")
        return
    if fmt == OutputFormat.JSON:
        output_list(threads, fmt)
        return
    output_list(comment_rows(threads), fmt, columns=COMMENT_COLUMNS, id_field="thread_id")


@app.command("create")
def create_comment(
    ctx: typer.Context,
    object: Annotated[str, typer.Option("--object", help="Object slug")],
    record: Annotated[str, typer.Option("--record", help="Record ID")],
    content: Annotated[str, typer.Option("--content", help="Comment content")],
    thread: Annotated[
        str | None,
        typer.Option("--thread", help="Thread ID to reply to (starts a new thread if omitted)"),
    ] = None,
) -> None:
    """Create a comment on a record, authored by the API token's member."""
    client = get_client(ctx)
    author_id = WorkspaceService(client).current_member_id()
    comment = CommentService(client).create_comment(
        content,
        author_id=author_id,
        object=object,
        record_id=record,
        thread_id=thread,
    )
    render_single(ctx, comment)


@app.command("delete")
def delete_comment(
    ctx: typer.Context,
    comment_id: Annotated[str, typer.Argument(help="Comment ID")],
    yes: YesOption = False,
) -> None:
    """Delete a comment."""
    if not confirm_action(f"Delete comment {comment_id}?", yes):
        return
    CommentService(get_client(ctx)).delete(comment_id)
    print_success("Deleted.")
