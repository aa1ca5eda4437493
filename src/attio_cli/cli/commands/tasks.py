"""
Task management commands.
"""

from __future__ import annotations

from typing import Annotated, Any

import typer

from attio_cli.cli.utils import get_client, render_list, render_single
from attio_cli.cli.utils.options import DEFAULT_LIMIT, LimitOption, OffsetOption, YesOption
from attio_cli.formatters.output import LIST_CELL_WIDTH, confirm_action, print_success, truncate
from attio_cli.services.tasks import TaskService

app = typer.Typer(help="Manage tasks")

TaskIdArgument = Annotated[str, typer.Argument(help="Task ID")]


def _get_service(ctx: typer.Context) -> TaskService:
    """Get task service."""
    return TaskService(get_client(ctx))


def _flatten_task(task: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": (task.get("id") or {}).get("task_id", ""),
        "content": truncate(task.get("content_plaintext") or "", LIST_CELL_WIDTH),
        "deadline": task.get("deadline_at") or "",
        "completed": bool(task.get("is_completed")),
    }


@app.command("list")
def list_tasks(
    ctx: typer.Context,
    assignee: Annotated[str | None, typer.Option("--assignee", help="Assignee workspace member ID")] = None,
    is_completed: Annotated[bool, typer.Option("--is-completed", help="Only completed tasks")] = False,
    linked_object: Annotated[str | None, typer.Option("--linked-object", help="Linked object slug")] = None,
    linked_record_id: Annotated[
        str | None, typer.Option("--linked-record-id", help="Linked record ID")
    ] = None,
    sort: Annotated[str | None, typer.Option("--sort", help="Sort order")] = None,
    limit: LimitOption = DEFAULT_LIMIT,
    offset: OffsetOption = 0,
) -> None:
    """List tasks."""
    tasks = _get_service(ctx).list_tasks(
        limit=limit,
        offset=offset,
        assignee=assignee,
        is_completed=is_completed,
        linked_object=linked_object,
        linked_record_id=linked_record_id,
        sort=sort,
    )
    render_list(ctx, tasks, _flatten_task, columns=["id", "content", "deadline", "completed"])


@app.command("get")
def get_task(ctx: typer.Context, task_id: TaskIdArgument) -> None:
    """Get a task by ID."""
    render_single(ctx, _get_service(ctx).get(task_id))


@app.command("create")
def create_task(
    ctx: typer.Context,
    content: Annotated[str, typer.Option("--content", help="Task content")],
    assignee: Annotated[
        list[str] | None,
        typer.Option("--assignee", help="Assignee workspace member ID (repeatable)"),
    ] = None,
    deadline: Annotated[str | None, typer.Option("--deadline", help="Deadline (ISO-8601)")] = None,
    record: Annotated[
        list[str] | None,
        typer.Option("--record", help="Link a record as object:record-id (repeatable)"),
    ] = None,
) -> None:
    """Create a new task."""
    task = _get_service(ctx).create_task(content, assignees=assignee, deadline=deadline, records=record)
    render_single(ctx, task)


@app.command("update")
def update_task(
    ctx: typer.Context,
    task_id: TaskIdArgument,
    complete: Annotated[bool, typer.Option("--complete", help="Mark task as completed")] = False,
    incomplete: Annotated[bool, typer.Option("--incomplete", help="Mark task as not completed")] = False,
    deadline: Annotated[str | None, typer.Option("--deadline", help="New deadline (ISO-8601)")] = None,
    content: Annotated[str | None, typer.Option("--content", help="New task content")] = None,
) -> None:
    """Update an existing task."""
    is_completed: bool | None = None
    if complete:
        is_completed = True
    elif incomplete:
        is_completed = False
    task = _get_service(ctx).update_task(task_id, is_completed=is_completed, deadline=deadline, content=content)
    render_single(ctx, task)


@app.command("delete")
def delete_task(ctx: typer.Context, task_id: TaskIdArgument, yes: YesOption = False) -> None:
    """Delete a task."""
    if not confirm_action(f"Delete task {task_id}?", yes):
        return
    _get_service(ctx).delete(task_id)
    print_success("Deleted.")
