"""
Tests for RecordService.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from attio_cli.core.exceptions import ValueInputError
from attio_cli.services.records import RecordService, search_records


@pytest.fixture
def service(mock_client: MagicMock) -> RecordService:
    """Create RecordService for companies with mock client."""
    return RecordService(mock_client, "companies")


class TestRecordService:
    """Tests for RecordService."""

    def test_base_path(self, service: RecordService) -> None:
        """Test base_path property."""
        assert service.base_path == "/objects/companies/records"

    def test_base_path_encodes_slug(self, mock_client: MagicMock) -> None:
        """Test object slugs are percent-encoded."""
        assert RecordService(mock_client, "my object").base_path == "/objects/my%20object/records"

    def test_query_body(self, service: RecordService, mock_client: MagicMock) -> None:
        """Test filter, sorts, limit and offset go in the body."""
        mock_client.post.return_value = [{"id": {"record_id": "r1"}}]

        result = service.query({"name": "Acme"}, [{"attribute": "name", "direction": "asc"}], 10, 20)

        mock_client.post.assert_called_once_with(
            "/objects/companies/records/query",
            json_data={
                "filter": {"name": "Acme"},
                "sorts": [{"attribute": "name", "direction": "asc"}],
                "limit": 10,
                "offset": 20,
            },
        )
        assert result == [{"id": {"record_id": "r1"}}]

    def test_query_omits_empty_filter(self, service: RecordService, mock_client: MagicMock) -> None:
        """Test empty filter and sorts are not sent."""
        service.query({}, [], 25, 0)

        assert mock_client.post.call_args.kwargs["json_data"] == {"limit": 25, "offset": 0}

    def test_list_all_pages(self, service: RecordService, mock_client: MagicMock) -> None:
        """Test --all pages with the fixed page size from offset 0."""
        mock_client.post.side_effect = [[{}] * 500, [{}] * 3]

        result = service.list_records(limit=10, offset=50, all_pages=True)

        assert len(result) == 503
        offsets = [c.kwargs["json_data"]["offset"] for c in mock_client.post.call_args_list]
        limits = [c.kwargs["json_data"]["limit"] for c in mock_client.post.call_args_list]
        assert offsets == [0, 500]
        assert limits == [500, 500]

    def test_get(self, service: RecordService, mock_client: MagicMock) -> None:
        """Test getting a record."""
        mock_client.get.return_value = {"id": {"record_id": "r1"}}

        service.get("r1")

        mock_client.get.assert_called_once_with("/objects/companies/records/r1")

    def test_create(self, service: RecordService, mock_client: MagicMock) -> None:
        """Test values are wrapped in data.values."""
        service.create({"name": "Acme"})

        mock_client.post.assert_called_once_with(
            "/objects/companies/records",
            json_data={"data": {"values": {"name": "Acme"}}},
        )

    def test_update(self, service: RecordService, mock_client: MagicMock) -> None:
        """Test update uses PATCH with data.values."""
        service.update("r1", {"tags": []})

        mock_client.patch.assert_called_once_with(
            "/objects/companies/records/r1",
            json_data={"data": {"values": {"tags": []}}},
        )

    def test_delete(self, service: RecordService, mock_client: MagicMock) -> None:
        """Test delete path."""
        service.delete("r1")

        mock_client.delete.assert_called_once_with("/objects/companies/records/r1")

    def test_assert_record(self, service: RecordService, mock_client: MagicMock) -> None:
        """Test assert uses PUT with matching_attribute."""
        service.assert_record("domains", {"domains": ["acme.com"]})

        mock_client.put.assert_called_once_with(
            "/objects/companies/records",
            json_data={"data": {"values": {"domains": ["acme.com"]}}},
            params={"matching_attribute": "domains"},
        )

    def test_assert_requires_match(self, service: RecordService, mock_client: MagicMock) -> None:
        """Test assert without a matching attribute is rejected locally."""
        with pytest.raises(ValueInputError):
            service.assert_record("", {"name": "Acme"})
        mock_client.put.assert_not_called()

    def test_attribute_values(self, service: RecordService, mock_client: MagicMock) -> None:
        """Test attribute values path and historic flag."""
        service.attribute_values("r1", "name", show_historic=False)

        mock_client.get.assert_called_once_with(
            "/objects/companies/records/r1/attributes/name/values",
            params={"show_historic": "false"},
        )

    def test_entries(self, service: RecordService, mock_client: MagicMock) -> None:
        """Test a record's list entries."""
        service.entries("r1", limit=5, offset=10)

        mock_client.get.assert_called_once_with(
            "/objects/companies/records/r1/entries",
            params={"limit": 5, "offset": 10},
        )

    def test_search_defaults_to_own_object(self, service: RecordService, mock_client: MagicMock) -> None:
        """Test search scopes to the service's object."""
        service.search("acme", limit=5)

        body = mock_client.post.call_args.kwargs["json_data"]
        assert body["objects"] == ["companies"]
        assert body["query"] == "acme"
        assert body["limit"] == 5


class TestSearchRecords:
    """Tests for search_records."""

    def test_body(self, mock_client: MagicMock) -> None:
        """Test search request body."""
        search_records(mock_client, "ada", ["people", "companies"], limit=10)

        mock_client.post.assert_called_once_with(
            "/objects/records/search",
            json_data={
                "query": "ada",
                "objects": ["people", "companies"],
                "request_as": {"type": "workspace"},
                "limit": 10,
            },
        )

    def test_requires_object(self, mock_client: MagicMock) -> None:
        """Test at least one object is required."""
        with pytest.raises(ValueInputError):
            search_records(mock_client, "ada", [])
