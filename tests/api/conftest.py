"""
Pytest fixtures for API client tests.
"""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from attio_cli.api.client import AttioClient

ResponseFactory = Callable[..., MagicMock]


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock requests.Session."""
    return MagicMock()


@pytest.fixture
def client(mock_session: MagicMock) -> AttioClient:
    """Create an AttioClient with mocked session."""
    client = AttioClient("test-api-key")
    client._session = mock_session
    return client


def _make_response(
    status_code: int = 200,
    json_data: Any = None,
    text: str = "",
    headers: dict[str, str] | None = None,
    reason: str = "",
) -> MagicMock:
    """Create a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = reason
    response.text = text or (str(json_data) if json_data is not None else "")
    response.headers = headers or {}
    response.url = "https://api.attio.com/v2/test"

    if json_data is not None:
        response.json.return_value = json_data
    else:
        response.json.side_effect = ValueError("No JSON")

    return response


@pytest.fixture
def make_response() -> ResponseFactory:
    """Factory for mock responses."""
    return _make_response
