"""
Services for Attio comments and comment threads.

A thread hangs off either a record or a list entry; comments belong to
a thread. Creating a comment without a thread starts a new one on the
record.
"""

from __future__ import annotations

from typing import Any

from attio_cli.core.exceptions import ValueInputError
from attio_cli.services.base import BaseService


def _require_pair(first: str | None, second: str | None, first_flag: str, second_flag: str) -> None:
    if bool(first) != bool(second):
        raise ValueInputError(f"{first_flag} and {second_flag} must be provided together.")


class ThreadService(BaseService):
    """
    Service for comment threads.

    Usage:
        svc = ThreadService(client)
        threads = svc.list_threads(object="companies", record_id="rec_1")
    """

    @property
    def base_path(self) -> str:
        return "/threads"

    def list_threads(
        self,
        limit: int = 25,
        offset: int = 0,
        object: str | None = None,
        record_id: str | None = None,
        list: str | None = None,
        entry_id: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List threads on a record or a list entry.

        Raises:
            ValueInputError: If object/record_id or list/entry_id is given alone
        """
        _require_pair(object, record_id, "--object", "--record")
        _require_pair(list, entry_id, "--list", "--entry")
        return self.list(
            limit=limit,
            offset=offset,
            object=object,
            record_id=record_id,
            list=list,
            entry_id=entry_id,
        )


class CommentService(BaseService):
    """
    Service for comments.

    Usage:
        svc = CommentService(client)
        svc.create_comment("Looks good", author_id="wm_1", object="deals", record_id="rec_9")
    """

    @property
    def base_path(self) -> str:
        return "/comments"

    def create_comment(
        self,
        content: str,
        author_id: str,
        object: str | None = None,
        record_id: str | None = None,
        thread_id: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a plaintext comment.

        Args:
            content: Comment text
            author_id: Workspace member ID of the author
            object: Object slug of the record (new thread)
            record_id: Record ID (new thread)
            thread_id: Existing thread to reply to

        Returns:
            Created comment

        Raises:
            ValueInputError: If neither a thread nor a record is given
        """
        data: dict[str, Any] = {
            "format": "plaintext",
            "content": content,
            "author": {"type": "workspace-member", "id": author_id},
        }
        if thread_id:
            data["thread_id"] = thread_id
        elif object and record_id:
            data["record"] = {"object": object, "record_id": record_id}
        else:
            raise ValueInputError("Provide --thread, or --object and --record.")
        return self.create(data)
