"""
Workspace member commands.
"""

from __future__ import annotations

from typing import Any

import typer

from attio_cli.cli.utils import get_client, render_list
from attio_cli.services.workspace import WorkspaceService

app = typer.Typer(help="Manage workspace members")


def _flatten_member(member: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": (member.get("id") or {}).get("workspace_member_id", ""),
        "first_name": member.get("first_name") or "",
        "last_name": member.get("last_name") or "",
        "email_address": member.get("email_address") or "",
        "access_level": member.get("access_level") or "",
    }


@app.command("list")
def list_members(ctx: typer.Context) -> None:
    """List workspace members (IDs are used for task assignees)."""
    members = WorkspaceService(get_client(ctx)).members()
    render_list(
        ctx,
        members,
        _flatten_member,
        columns=["id", "first_name", "last_name", "email_address", "access_level"],
    )
