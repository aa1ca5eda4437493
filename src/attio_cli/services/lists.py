"""
Service for Attio lists.
"""

from __future__ import annotations

import re
from typing import Any

from attio_cli.core.exceptions import ValueInputError
from attio_cli.services.base import BaseService

WORKSPACE_ACCESS_LEVELS = ("full-access", "read-and-write", "read-only")

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """
    Derive a snake_case API slug from a list name.

    Example:
        >>> slugify("Sales Pipeline (2025)")
        'sales_pipeline_2025'
    """
    return _SLUG_SEPARATORS.sub("_", name.lower()).strip("_")


def parse_member_access(entries: list[str]) -> list[dict[str, str]]:
    """
    Parse ``member-id:level`` pairs into workspace member access grants.

    The split is on the last colon, so member IDs may contain colons.

    Raises:
        ValueInputError: If an entry has no colon
    """
    grants = []
    for entry in entries:
        member_id, sep, level = entry.rpartition(":")
        if not sep:
            raise ValueInputError(f'Invalid --member-access format: "{entry}". Expected: member-id:level')
        grants.append({"workspace_member_id": member_id, "level": level})
    return grants


class ListService(BaseService):
    """
    Service for managing Attio lists.

    Usage:
        svc = ListService(client)
        lists = svc.list()
        new = svc.create_list("Sales Pipeline", parent_object="companies")
    """

    @property
    def base_path(self) -> str:
        return "/lists"

    def create_list(
        self,
        name: str,
        parent_object: str,
        api_slug: str | None = None,
        workspace_access: str = "full-access",
        member_access: list[str] | None = None,
    ) -> dict[str, Any]:
        """
        Create a list.

        Args:
            name: Human-readable list name
            parent_object: Object whose records the list holds
            api_slug: API slug; derived from name when omitted
            workspace_access: Access level for all workspace members
            member_access: Per-member grants as "member-id:level"

        Returns:
            Created list
        """
        data = {
            "name": name,
            "api_slug": api_slug or slugify(name),
            "parent_object": parent_object,
            "workspace_access": workspace_access,
            "workspace_member_access": parse_member_access(member_access or []),
        }
        return self.create(data)
