"""
Service for Attio records.

Records are the rows of an object (people, companies, deals or any
custom object). Listing goes through the query endpoint so filters and
sorts can be sent in the body.
"""

from __future__ import annotations

from typing import Any

from attio_cli.api.client import AttioClient
from attio_cli.api.pagination import paginate
from attio_cli.core.exceptions import ValueInputError
from attio_cli.services.base import BaseService, path_segment


class RecordService(BaseService):
    """
    Service for records of a single Attio object.

    Usage:
        svc = RecordService(client, "companies")
        records = svc.list_records(filter={"name": {"$contains": "Acme"}}, limit=10)
        record = svc.assert_record("domains", {"domains": ["acme.com"]})
    """

    def __init__(self, client: AttioClient, object: str):
        super().__init__(client)
        self.object = object

    @property
    def base_path(self) -> str:
        return f"/objects/{path_segment(self.object)}/records"

    def query(
        self,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        limit: int = 25,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        """
        Fetch one page of records through the query endpoint.

        Args:
            filter: Attio filter JSON (omitted when empty)
            sorts: Sort specs (omitted when empty)
            limit: Page size
            offset: Records to skip

        Returns:
            List of records
        """
        body: dict[str, Any] = {}
        if filter:
            body["filter"] = filter
        if sorts:
            body["sorts"] = sorts
        body["limit"] = limit
        body["offset"] = offset
        return self.client.post(f"{self.base_path}/query", json_data=body) or []

    def list_records(
        self,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        limit: int = 25,
        offset: int = 0,
        all_pages: bool = False,
    ) -> list[dict[str, Any]]:
        """List records, optionally fetching every page."""
        return paginate(
            lambda page_limit, page_offset: self.query(filter, sorts, page_limit, page_offset),
            limit=limit,
            offset=offset,
            all_pages=all_pages,
        )

    def create(self, values: dict[str, Any]) -> dict[str, Any]:  # type: ignore[override]
        """Create a record from attribute values."""
        return super().create({"values": values})

    def update(self, record_id: str, values: dict[str, Any]) -> dict[str, Any]:  # type: ignore[override]
        """Update a record's attribute values."""
        return super().update(record_id, {"values": values})

    def assert_record(self, matching_attribute: str, values: dict[str, Any]) -> dict[str, Any]:
        """
        Create or update a record matched on a unique attribute.

        Args:
            matching_attribute: Attribute slug used to find an existing record
            values: Attribute values

        Returns:
            The created or updated record

        Raises:
            ValueInputError: If matching_attribute is empty
        """
        if not matching_attribute:
            raise ValueInputError("--match <attribute-slug> is required for assert")
        return self.client.put(
            self.base_path,
            json_data={"data": {"values": values}},
            params={"matching_attribute": matching_attribute},
        )

    def search(
        self,
        query: str,
        limit: int = 25,
        objects: list[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Search this object's records (or the given objects) by text."""
        return search_records(self.client, query, objects or [self.object], limit)

    def attribute_values(
        self,
        record_id: str,
        attribute: str,
        show_historic: bool = True,
    ) -> list[dict[str, Any]]:
        """
        Get the values of one attribute on a record.

        Args:
            record_id: Record ID
            attribute: Attribute slug or ID
            show_historic: Include values that are no longer active

        Returns:
            List of attribute value objects
        """
        path = self._item_path(record_id, "attributes", attribute, "values")
        params = {"show_historic": "true" if show_historic else "false"}
        return self.client.get(path, params=params) or []

    def entries(self, record_id: str, limit: int = 25, offset: int = 0) -> list[dict[str, Any]]:
        """List the list entries that reference a record."""
        path = self._item_path(record_id, "entries")
        return self.client.get(path, params={"limit": limit, "offset": offset}) or []


def search_records(
    client: AttioClient,
    query: str,
    objects: list[str],
    limit: int = 25,
) -> list[dict[str, Any]]:
    """
    Full-text search across one or more objects.

    Args:
        client: Configured AttioClient
        query: Search text
        objects: Object slugs to search
        limit: Maximum results

    Returns:
        Matching records

    Raises:
        ValueInputError: If no objects are given
    """
    if not objects:
        raise ValueInputError("Provide at least one --object to search")
    body = {
        "query": query,
        "objects": list(objects),
        "request_as": {"type": "workspace"},
        "limit": limit,
    }
    return client.post("/objects/records/search", json_data=body) or []
