"""
Service for Attio notes.

Notes are attached to a parent record and hold plaintext or markdown
content.
"""

from __future__ import annotations

from typing import Any

from attio_cli.services.base import BaseService

NOTE_FORMATS = ("plaintext", "markdown")


class NoteService(BaseService):
    """
    Service for managing notes.

    Usage:
        svc = NoteService(client)
        notes = svc.list_notes(parent_object="companies", parent_record_id="rec_1")
        note = svc.create_note("companies", "rec_1", "Call recap", "Discussed pricing")
    """

    @property
    def base_path(self) -> str:
        return "/notes"

    def list_notes(
        self,
        limit: int = 25,
        offset: int = 0,
        parent_object: str | None = None,
        parent_record_id: str | None = None,
    ) -> list[dict[str, Any]]:
        """List notes, optionally only those on one record."""
        return self.list(
            limit=limit,
            offset=offset,
            parent_object=parent_object,
            parent_record_id=parent_record_id,
        )

    def create_note(
        self,
        parent_object: str,
        parent_record_id: str,
        title: str,
        content: str,
        format: str = "plaintext",
    ) -> dict[str, Any]:
        """
        Create a note on a record.

        Args:
            parent_object: Object slug of the parent record
            parent_record_id: Parent record ID
            title: Note title
            content: Note body
            format: "plaintext" or "markdown"

        Returns:
            Created note
        """
        return self.create(
            {
                "parent_object": parent_object,
                "parent_record_id": parent_record_id,
                "title": title,
                "format": format,
                "content": content,
            }
        )
