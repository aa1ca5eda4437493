"""
Services for Attio objects and their attributes.
"""

from __future__ import annotations

from attio_cli.api.client import AttioClient
from attio_cli.services.base import BaseService, path_segment


class ObjectService(BaseService):
    """Service for workspace objects (people, companies, custom objects)."""

    @property
    def base_path(self) -> str:
        return "/objects"


class AttributeService(BaseService):
    """
    Service for the attributes of one object.

    Usage:
        svc = AttributeService(client, "companies")
        for attr in svc.list():
            print(attr["api_slug"], attr["type"])
    """

    def __init__(self, client: AttioClient, object: str):
        super().__init__(client)
        self.object = object

    @property
    def base_path(self) -> str:
        return f"/objects/{path_segment(self.object)}/attributes"
