"""
Tests for CommentService and ThreadService.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from attio_cli.core.exceptions import ValueInputError
from attio_cli.services.comments import CommentService, ThreadService


class TestThreadService:
    """Tests for ThreadService."""

    def test_list_on_record(self, mock_client: MagicMock) -> None:
        """Test listing threads on a record."""
        ThreadService(mock_client).list_threads(object="deals", record_id="d1")

        mock_client.get.assert_called_once_with(
            "/threads",
            params={
                "limit": 25,
                "offset": 0,
                "object": "deals",
                "record_id": "d1",
                "list": None,
                "entry_id": None,
            },
        )

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"object": "deals"},
            {"record_id": "d1"},
            {"list": "sales"},
            {"entry_id": "e1"},
        ],
    )
    def test_pairs_required(self, mock_client: MagicMock, kwargs: dict[str, str]) -> None:
        """Test half a pair is rejected before any request."""
        with pytest.raises(ValueInputError):
            ThreadService(mock_client).list_threads(**kwargs)
        mock_client.get.assert_not_called()


class TestCommentService:
    """Tests for CommentService."""

    def test_create_on_record(self, mock_client: MagicMock) -> None:
        """Test a comment on a record starts a thread."""
        CommentService(mock_client).create_comment("Nice", "wm-1", object="deals", record_id="d1")

        mock_client.post.assert_called_once_with(
            "/comments",
            json_data={
                "data": {
                    "format": "plaintext",
                    "content": "Nice",
                    "author": {"type": "workspace-member", "id": "wm-1"},
                    "record": {"object": "deals", "record_id": "d1"},
                }
            },
        )

    def test_reply_to_thread(self, mock_client: MagicMock) -> None:
        """Test a thread ID takes precedence over the record."""
        CommentService(mock_client).create_comment("+1", "wm-1", object="deals", record_id="d1", thread_id="th-1")

        data = mock_client.post.call_args.kwargs["json_data"]["data"]
        assert data["thread_id"] == "th-1"
        assert "record" not in data

    def test_requires_target(self, mock_client: MagicMock) -> None:
        """Test a comment needs a thread or a record."""
        with pytest.raises(ValueInputError):
            CommentService(mock_client).create_comment("Lost", "wm-1", object="deals")

    def test_delete(self, mock_client: MagicMock) -> None:
        """Test delete path."""
        CommentService(mock_client).delete("c1")

        mock_client.delete.assert_called_once_with("/comments/c1")
