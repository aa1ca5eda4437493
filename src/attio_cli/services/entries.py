"""
Service for Attio list entries.
"""

from __future__ import annotations

from typing import Any

from attio_cli.api.client import AttioClient
from attio_cli.api.pagination import paginate
from attio_cli.services.base import BaseService, path_segment


class EntryService(BaseService):
    """
    Service for the entries of a single Attio list.

    An entry places a parent record (person, company, ...) on a list and
    carries the list's own attribute values in ``entry_values``.

    Usage:
        svc = EntryService(client, "sales_pipeline")
        entries = svc.list_entries(filter={"stage": "qualified"}, all_pages=True)
        entry = svc.create("rec_123", "companies", {"stage": "lead"})
    """

    def __init__(self, client: AttioClient, list_id: str):
        super().__init__(client)
        self.list_id = list_id

    @property
    def base_path(self) -> str:
        return f"/lists/{path_segment(self.list_id)}/entries"

    def query(
        self,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        limit: int = 25,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        """Fetch one page of entries through the query endpoint."""
        body: dict[str, Any] = {"limit": limit, "offset": offset}
        if filter:
            body["filter"] = filter
        if sorts:
            body["sorts"] = sorts
        return self.client.post(f"{self.base_path}/query", json_data=body) or []

    def list_entries(
        self,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        limit: int = 25,
        offset: int = 0,
        all_pages: bool = False,
    ) -> list[dict[str, Any]]:
        """List entries, optionally fetching every page."""
        return paginate(
            lambda page_limit, page_offset: self.query(filter, sorts, page_limit, page_offset),
            limit=limit,
            offset=offset,
            all_pages=all_pages,
        )

    def create(  # type: ignore[override]
        self,
        parent_record_id: str,
        parent_object: str,
        entry_values: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Add a record to the list.

        Args:
            parent_record_id: ID of the record being added
            parent_object: Object slug of that record
            entry_values: List attribute values (may be empty)

        Returns:
            Created entry
        """
        return super().create(_entry_body(parent_record_id, parent_object, entry_values))

    def assert_entry(
        self,
        parent_record_id: str,
        parent_object: str,
        entry_values: dict[str, Any],
    ) -> dict[str, Any]:
        """Create an entry for the record, or update its existing entry."""
        body = _entry_body(parent_record_id, parent_object, entry_values)
        return self.client.put(self.base_path, json_data={"data": body})

    def update(self, entry_id: str, entry_values: dict[str, Any]) -> dict[str, Any]:  # type: ignore[override]
        """Update an entry's values."""
        return super().update(entry_id, {"entry_values": entry_values})


def _entry_body(parent_record_id: str, parent_object: str, entry_values: dict[str, Any]) -> dict[str, Any]:
    return {
        "parent_record_id": parent_record_id,
        "parent_object": parent_object,
        "entry_values": entry_values,
    }
