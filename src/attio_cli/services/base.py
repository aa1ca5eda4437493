"""
Base service class for Attio API operations.

Provides common CRUD operations that can be inherited by
resource-specific service classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote

from attio_cli.api.client import AttioClient
from attio_cli.api.pagination import paginate


def path_segment(value: str) -> str:
    """Percent-encode a single URL path segment."""
    return quote(str(value), safe="")


class BaseService(ABC):
    """
    Base class for Attio API service operations.

    Provides standard CRUD operations (list, get, create, update, delete)
    that work with any API resource. Subclasses define the base_path.
    Write bodies are wrapped in Attio's {"data": ...} envelope here, and
    the client unwraps responses, so callers only see payloads.

    Usage:
        class NoteService(BaseService):
            @property
            def base_path(self) -> str:
                return "/notes"

        svc = NoteService(client)
        notes = svc.list(limit=10)
    """

    def __init__(self, client: AttioClient):
        """
        Initialize service with an authenticated API client.

        Args:
            client: Configured AttioClient instance
        """
        self.client = client

    @property
    @abstractmethod
    def base_path(self) -> str:
        """Return the base API path for this resource (e.g., '/notes')."""
        ...

    def _item_path(self, id: str, *parts: str) -> str:
        segments = [path_segment(id), *(path_segment(p) for p in parts)]
        return f"{self.base_path}/{'/'.join(segments)}"

    def list(self, **params: Any) -> list[dict[str, Any]]:
        """
        List resources.

        Args:
            **params: Query parameters; None values are dropped

        Returns:
            List of resource dictionaries
        """
        return self.client.get(self.base_path, params=params or None) or []

    def list_paginated(
        self,
        limit: int,
        offset: int = 0,
        all_pages: bool = False,
        **params: Any,
    ) -> list[dict[str, Any]]:
        """
        List resources from an offset-paginated GET endpoint.

        Args:
            limit: Page size for a single fetch
            offset: Starting offset for a single fetch
            all_pages: Fetch every page
            **params: Extra query parameters

        Returns:
            List of resource dictionaries
        """
        return paginate(
            lambda page_limit, page_offset: self.list(limit=page_limit, offset=page_offset, **params),
            limit=limit,
            offset=offset,
            all_pages=all_pages,
        )

    def get(self, id: str) -> dict[str, Any]:
        """
        Get a single resource by ID.

        Args:
            id: Resource ID or slug

        Returns:
            Resource dictionary
        """
        return self.client.get(self._item_path(id))

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Create a new resource.

        Args:
            data: Resource data, sent as {"data": data}

        Returns:
            Created resource dictionary (with ID)
        """
        return self.client.post(self.base_path, json_data={"data": data})

    def update(self, id: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Update an existing resource.

        Args:
            id: Resource ID
            data: Fields to update, sent as {"data": data}

        Returns:
            Updated resource dictionary
        """
        return self.client.patch(self._item_path(id), json_data={"data": data})

    def delete(self, id: str) -> Any:
        """
        Delete a resource.

        Args:
            id: Resource ID

        Returns:
            Deletion response (None for 204 No Content)
        """
        return self.client.delete(self._item_path(id))
