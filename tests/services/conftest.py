"""
Pytest fixtures for service tests.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock AttioClient."""
    client = MagicMock()
    client.get.return_value = []
    client.post.return_value = []
    return client
