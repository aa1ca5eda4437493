"""
Pytest fixtures for CLI tests.

Commands run end to end through the Typer app; only the HTTP session is
replaced, so request assertions see exactly what would go on the wire.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any, Callable
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from attio_cli.core.config import reset_settings

ResponseFactory = Callable[..., MagicMock]


@pytest.fixture
def runner() -> CliRunner:
    """Create a Typer CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Point settings at a temporary config dir with a test API key."""
    config_dir = tmp_path / "attio"
    monkeypatch.setenv("ATTIO_API_KEY", "test-key")
    monkeypatch.setenv("ATTIO_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("ATTIO_DEBUG", raising=False)
    monkeypatch.delenv("ATTIO_BASE_URL", raising=False)
    reset_settings()
    yield config_dir
    reset_settings()


@pytest.fixture
def mock_session() -> Iterator[MagicMock]:
    """Replace the requests.Session used by every AttioClient."""
    session = MagicMock()
    with patch("attio_cli.api.client.requests.Session", return_value=session):
        yield session


def _make_response(status_code: int = 200, json_data: Any = None, headers: dict[str, str] | None = None) -> MagicMock:
    """Create a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = ""
    response.text = "" if json_data is None else str(json_data)
    response.headers = headers or {}
    if json_data is not None:
        response.json.return_value = json_data
    else:
        response.json.side_effect = ValueError("No JSON")
    return response


@pytest.fixture
def make_response() -> ResponseFactory:
    """Factory for mock responses."""
    return _make_response


def record(record_id: str, name: str = "Acme") -> dict[str, Any]:
    """A minimal company record as the API returns it."""
    return {
        "id": {"workspace_id": "ws-1", "object_id": "obj-1", "record_id": record_id},
        "created_at": "2024-01-15T09:30:00.000Z",
        "web_url": f"https://app.attio.com/acme/company/{record_id}",
        "values": {"name": [{"attribute_type": "text", "value": name}]},
    }


@pytest.fixture
def make_record() -> Callable[..., dict[str, Any]]:
    """Factory for record payloads."""
    return record
