"""
List management commands.
"""

from __future__ import annotations

from typing import Annotated, Any

import typer

from attio_cli.cli.utils import get_client, render_list, render_single
from attio_cli.services.lists import WORKSPACE_ACCESS_LEVELS, ListService

app = typer.Typer(help="Manage lists")

LIST_COLUMNS = ["id", "api_slug", "name", "parent_object"]


def _get_service(ctx: typer.Context) -> ListService:
    """Get list service."""
    return ListService(get_client(ctx))


def _parent_object(item: dict[str, Any]) -> str:
    parent = item.get("parent_object")
    if isinstance(parent, list):
        return ", ".join(str(p) for p in parent)
    return parent or ""


def _flatten_list(item: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": (item.get("id") or {}).get("list_id", ""),
        "api_slug": item.get("api_slug") or "",
        "name": item.get("name") or "",
        "parent_object": _parent_object(item),
        "workspace_access": item.get("workspace_access") or "",
    }


def _flatten_list_detail(item: dict[str, Any]) -> dict[str, Any]:
    actor = item.get("created_by_actor") or {}
    return {
        **_flatten_list(item),
        "created_by_actor_type": actor.get("type") or "",
        "created_by_actor_id": actor.get("id") or "",
    }


@app.command("list")
def list_lists(ctx: typer.Context) -> None:
    """List all lists."""
    render_list(ctx, _get_service(ctx).list(), _flatten_list, columns=LIST_COLUMNS)


@app.command("get")
def get_list(
    ctx: typer.Context,
    list: Annotated[str, typer.Argument(help="List slug or ID")],
) -> None:
    """Get a list by ID or slug."""
    render_single(ctx, _get_service(ctx).get(list), _flatten_list_detail)


@app.command("create")
def create_list(
    ctx: typer.Context,
    name: Annotated[str, typer.Option("--name", help="Human-readable name for the list")],
    parent_object: Annotated[
        str,
        typer.Option("--parent-object", help='Object of the records in this list (e.g. "people")'),
    ],
    api_slug: Annotated[
        str | None,
        typer.Option("--api-slug", help="API slug in snake_case (derived from name if omitted)"),
    ] = None,
    workspace_access: Annotated[
        str,
        typer.Option(
            "--workspace-access",
            help=f"Access for all workspace members: {', '.join(WORKSPACE_ACCESS_LEVELS)}",
        ),
    ] = "full-access",
    member_access: Annotated[
        list[str] | None,
        typer.Option("--member-access", help="Grant a member access as member-id:level (repeatable)"),
    ] = None,
) -> None:
    """Create a new list."""
    created = _get_service(ctx).create_list(
        name=name,
        parent_object=parent_object,
        api_slug=api_slug,
        workspace_access=workspace_access,
        member_access=member_access,
    )
    render_single(ctx, created, _flatten_list)
