"""
Service for Attio tasks.
"""

from __future__ import annotations

from typing import Any

from attio_cli.core.exceptions import ValueInputError
from attio_cli.services.base import BaseService


def parse_linked_record(value: str) -> dict[str, str]:
    """
    Parse ``object:record-id`` into a task linked-record reference.

    Raises:
        ValueInputError: If either side of the colon is missing
    """
    target_object, sep, target_record_id = value.partition(":")
    if not sep or not target_object or not target_record_id:
        raise ValueInputError(f'Invalid --record format: "{value}". Expected: object:record-id')
    return {"target_object": target_object, "target_record_id": target_record_id}


def workspace_member_ref(member_id: str) -> dict[str, str]:
    """Build an actor reference to a workspace member."""
    return {"referenced_actor_type": "workspace-member", "referenced_actor_id": member_id}


class TaskService(BaseService):
    """
    Service for managing tasks.

    Usage:
        svc = TaskService(client)
        open_tasks = svc.list_tasks(assignee="wm_123")
        task = svc.create_task("Follow up", records=["companies:rec_1"])
        svc.update_task(task["id"]["task_id"], is_completed=True)
    """

    @property
    def base_path(self) -> str:
        return "/tasks"

    def list_tasks(
        self,
        limit: int = 25,
        offset: int = 0,
        assignee: str | None = None,
        is_completed: bool = False,
        linked_object: str | None = None,
        linked_record_id: str | None = None,
        sort: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List tasks.

        Args:
            limit: Maximum tasks
            offset: Tasks to skip
            assignee: Workspace member ID
            is_completed: Only completed tasks
            linked_object: Object of a linked record
            linked_record_id: ID of a linked record
            sort: Server-side sort order

        Returns:
            List of tasks
        """
        return self.list(
            limit=limit,
            offset=offset,
            assignee=assignee,
            is_completed="true" if is_completed else None,
            linked_object=linked_object,
            linked_record_id=linked_record_id,
            sort=sort,
        )

    def create_task(
        self,
        content: str,
        assignees: list[str] | None = None,
        deadline: str | None = None,
        records: list[str] | None = None,
    ) -> dict[str, Any]:
        """
        Create a plaintext task.

        Args:
            content: Task text
            assignees: Workspace member IDs
            deadline: ISO-8601 deadline
            records: Linked records as "object:record-id"

        Returns:
            Created task
        """
        linked_records = [parse_linked_record(r) for r in records or []]
        return self.create(
            {
                "content": content,
                "format": "plaintext",
                "is_completed": False,
                "deadline_at": deadline or None,
                "assignees": [workspace_member_ref(m) for m in assignees or []],
                "linked_records": linked_records,
            }
        )

    def update_task(
        self,
        task_id: str,
        is_completed: bool | None = None,
        deadline: str | None = None,
        content: str | None = None,
    ) -> dict[str, Any]:
        """
        Update selected fields of a task.

        Raises:
            ValueInputError: If no field is given
        """
        data: dict[str, Any] = {}
        if is_completed is not None:
            data["is_completed"] = is_completed
        if deadline:
            data["deadline_at"] = deadline
        if content:
            data["content"] = content
        if not data:
            raise ValueInputError("Nothing to update. Provide --complete, --incomplete, --deadline or --content.")
        return self.update(task_id, data)
