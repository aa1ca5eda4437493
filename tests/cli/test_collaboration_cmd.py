"""
Tests for tasks, notes, comments and threads commands.
"""

from __future__ import annotations

import json
from typing import Callable
from unittest.mock import MagicMock

from typer.testing import CliRunner

from attio_cli.cli.main import app

ResponseFactory = Callable[..., MagicMock]

THREADS = [
    {
        "id": {"workspace_id": "ws-1", "thread_id": "th-1"},
        "comments": [
            {"author": {"type": "workspace-member", "id": "wm-1"}, "content_plaintext": "First", "created_at": "2024-01-01"},
            {"author": {"type": "workspace-member", "id": "wm-2"}, "content_plaintext": "Reply", "created_at": "2024-01-02"},
        ],
        "created_at": "2024-01-01",
    },
    {"id": {"workspace_id": "ws-1", "thread_id": "th-2"}, "comments": [], "created_at": "2024-02-01"},
]


class TestTasksCommands:
    """Tests for tasks commands."""

    def test_create(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test task create body."""
        mock_session.request.return_value = make_response(
            200, {"data": {"id": {"workspace_id": "ws-1", "task_id": "t1"}}}
        )

        result = runner.invoke(
            app,
            [
                "-q", "tasks", "create",
                "--content", "Send proposal",
                "--assignee", "wm-1",
                "--deadline", "2025-02-01T09:00:00Z",
                "--record", "deals:d1",
            ],
        )

        assert result.exit_code == 0, result.output
        assert result.stdout == "t1\n"
        data = mock_session.request.call_args.kwargs["json"]["data"]
        assert data["content"] == "Send proposal"
        assert data["linked_records"] == [{"target_object": "deals", "target_record_id": "d1"}]
        assert data["assignees"][0]["referenced_actor_id"] == "wm-1"

    def test_create_bad_record_reference(self, runner: CliRunner, mock_session: MagicMock) -> None:
        """Test a malformed --record exits 4."""
        result = runner.invoke(app, ["tasks", "create", "--content", "x", "--record", "deals"])

        assert result.exit_code == 4
        mock_session.request.assert_not_called()

    def test_update_complete(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test --complete sends is_completed true."""
        mock_session.request.return_value = make_response(200, {"data": {"id": {"task_id": "t1"}}})

        result = runner.invoke(app, ["tasks", "update", "t1", "--complete"])

        assert result.exit_code == 0, result.output
        kwargs = mock_session.request.call_args.kwargs
        assert kwargs["method"] == "PATCH"
        assert kwargs["json"] == {"data": {"is_completed": True}}

    def test_update_nothing(self, runner: CliRunner, mock_session: MagicMock) -> None:
        """Test an empty update exits 4."""
        result = runner.invoke(app, ["tasks", "update", "t1"])

        assert result.exit_code == 4
        assert "Nothing to update" in result.output
        mock_session.request.assert_not_called()

    def test_list_params(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test list filters are query parameters."""
        mock_session.request.return_value = make_response(200, {"data": []})

        result = runner.invoke(app, ["tasks", "list", "--assignee", "wm-1", "--is-completed"])

        assert result.exit_code == 0, result.output
        assert mock_session.request.call_args.kwargs["params"] == {
            "limit": 25,
            "offset": 0,
            "assignee": "wm-1",
            "is_completed": "true",
        }


class TestNotesCommands:
    """Tests for notes commands."""

    def test_create(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test note create body."""
        mock_session.request.return_value = make_response(200, {"data": {"id": {"note_id": "n1"}}})

        result = runner.invoke(
            app,
            [
                "notes", "create",
                "--object", "companies",
                "--record", "r1",
                "--title", "Kickoff",
                "--content", "Agreed scope",
            ],
        )

        assert result.exit_code == 0, result.output
        assert mock_session.request.call_args.kwargs["json"] == {
            "data": {
                "parent_object": "companies",
                "parent_record_id": "r1",
                "title": "Kickoff",
                "format": "plaintext",
                "content": "Agreed scope",
            }
        }


class TestCommentsCommands:
    """Tests for comments commands."""

    def test_list_rows_per_comment(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test tables get one row per comment."""
        mock_session.request.return_value = make_response(200, {"data": THREADS})

        result = runner.invoke(app, ["--csv", "comments", "list", "--object", "deals", "--record", "d1"])

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == [
            "thread_id,author,content,created_at",
            "th-1,wm-1,First,2024-01-01",
            "th-1,wm-2,Reply,2024-01-02",
        ]

    def test_list_quiet_prints_thread_ids(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test quiet mode prints thread IDs."""
        mock_session.request.return_value = make_response(200, {"data": THREADS})

        result = runner.invoke(app, ["-q", "comments", "list", "--object", "deals", "--record", "d1"])

        assert result.exit_code == 0, result.output
        assert result.stdout == "th-1\nth-2\n"

    def test_list_json_is_threads(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test JSON output keeps the raw threads."""
        mock_session.request.return_value = make_response(200, {"data": THREADS})

        result = runner.invoke(app, ["comments", "list", "--object", "deals", "--record", "d1"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == THREADS

    def test_create_uses_token_member(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test the author is the member that authorized the token."""
        mock_session.request.side_effect = [
            make_response(200, {"workspace_id": "ws-1", "authorized_by_workspace_member_id": "wm-7"}),
            make_response(200, {"data": {"id": {"comment_id": "c1"}}}),
        ]

        result = runner.invoke(
            app,
            ["comments", "create", "--object", "deals", "--record", "d1", "--content", "Ship it"],
        )

        assert result.exit_code == 0, result.output
        first, second = mock_session.request.call_args_list
        assert first.kwargs["url"].endswith("/self")
        assert second.kwargs["json"]["data"]["author"] == {"type": "workspace-member", "id": "wm-7"}
        assert second.kwargs["json"]["data"]["record"] == {"object": "deals", "record_id": "d1"}


class TestThreadsCommands:
    """Tests for threads commands."""

    def test_list_on_entry(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test listing threads on a list entry."""
        mock_session.request.return_value = make_response(200, {"data": THREADS})

        result = runner.invoke(app, ["-q", "threads", "list", "--list", "sales", "--entry", "e1"])

        assert result.exit_code == 0, result.output
        assert result.stdout == "th-1\nth-2\n"
        params = mock_session.request.call_args.kwargs["params"]
        assert params == {"limit": 25, "offset": 0, "list": "sales", "entry_id": "e1"}

    def test_unpaired_option(self, runner: CliRunner, mock_session: MagicMock) -> None:
        """Test --object without --record exits 4."""
        result = runner.invoke(app, ["threads", "list", "--object", "deals"])

        assert result.exit_code == 4
        assert "--object and --record must be provided together" in result.output
        mock_session.request.assert_not_called()
