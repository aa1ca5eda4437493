"""
Service for workspace identity and members.
"""

from __future__ import annotations

from typing import Any

from attio_cli.services.base import BaseService


class WorkspaceService(BaseService):
    """
    Service for the current workspace.

    Usage:
        svc = WorkspaceService(client)
        me = svc.whoami()
        members = svc.members()
    """

    @property
    def base_path(self) -> str:
        return "/workspace_members"

    def whoami(self) -> dict[str, Any]:
        """
        Describe the token in use.

        /self answers with a flat object rather than a data envelope.
        """
        return self.client.get("/self") or {}

    def members(self) -> list[dict[str, Any]]:
        """List workspace members."""
        return self.list()

    def current_member_id(self) -> str:
        """Workspace member ID that authorized the API token."""
        return self.whoami().get("authorized_by_workspace_member_id") or ""
