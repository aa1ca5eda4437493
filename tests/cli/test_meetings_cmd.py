"""
Tests for meetings and recordings commands.
"""

from __future__ import annotations

import json
from typing import Callable
from unittest.mock import MagicMock

from typer.testing import CliRunner

from attio_cli.cli.main import app

ResponseFactory = Callable[..., MagicMock]


def meeting(meeting_id: str) -> dict:
    return {
        "id": {"workspace_id": "ws-1", "meeting_id": meeting_id},
        "title": f"Meeting {meeting_id}",
        "start": {"datetime": "2024-05-01T10:00:00Z", "timezone": "UTC"},
        "end": {"datetime": "2024-05-01T11:00:00Z", "timezone": "UTC"},
        "is_all_day": False,
        "participants": [{"email_address": "a@example.com"}],
    }


class TestMeetingsCommands:
    """Tests for meetings commands."""

    def test_list_with_cursor(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test --cursor and filters are query parameters."""
        mock_session.request.return_value = make_response(
            200, {"data": [meeting("m1")], "pagination": {"next_cursor": "c2"}}
        )

        result = runner.invoke(
            app,
            [
                "-q", "meetings", "list",
                "--cursor", "c1",
                "--limit", "10",
                "--linked-object", "companies",
                "--linked-record-id", "r1",
                "--sort", "start_desc",
            ],
        )

        assert result.exit_code == 0, result.output
        assert result.stdout == "m1\n"
        kwargs = mock_session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"].endswith("/meetings")
        assert kwargs["params"] == {
            "limit": 10,
            "linked_object": "companies",
            "linked_record_id": "r1",
            "sort": "start_desc",
            "cursor": "c1",
        }

    def test_list_all_follows_cursor(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test --all follows next_cursor."""
        mock_session.request.side_effect = [
            make_response(200, {"data": [meeting("m1")], "pagination": {"next_cursor": "c2"}}),
            make_response(200, {"data": [meeting("m2")], "pagination": {"next_cursor": None}}),
        ]

        result = runner.invoke(app, ["-q", "meetings", "list", "--all"])

        assert result.exit_code == 0, result.output
        assert result.stdout == "m1\nm2\n"
        cursors = [c.kwargs["params"].get("cursor") for c in mock_session.request.call_args_list]
        assert cursors == [None, "c2"]

    def test_csv_flattens_start_and_end(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test tables show start/end timestamps and participant count."""
        mock_session.request.return_value = make_response(200, {"data": [meeting("m1")]})

        result = runner.invoke(app, ["--csv", "meetings", "list"])

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == [
            "id,title,start,end,is_all_day,participants",
            "m1,Meeting m1,2024-05-01T10:00:00Z,2024-05-01T11:00:00Z,false,1",
        ]

    def test_linked_record_requires_object(self, runner: CliRunner, mock_session: MagicMock) -> None:
        """Test --linked-record-id alone exits 4."""
        result = runner.invoke(app, ["meetings", "list", "--linked-record-id", "r1"])

        assert result.exit_code == 4
        mock_session.request.assert_not_called()


class TestRecordingsCommands:
    """Tests for recordings commands."""

    def test_list(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test recordings are listed per meeting."""
        mock_session.request.return_value = make_response(
            200,
            {
                "data": [{"id": {"meeting_id": "m1", "call_recording_id": "cr1"}, "status": "completed"}],
                "pagination": {"next_cursor": None},
            },
        )

        result = runner.invoke(app, ["-q", "recordings", "list", "--meeting", "m1"])

        assert result.exit_code == 0, result.output
        assert result.stdout == "cr1\n"
        assert mock_session.request.call_args.kwargs["url"].endswith("/meetings/m1/call_recordings")

    def test_get_with_transcript(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test --transcript attaches every transcript page."""
        recording = {"id": {"meeting_id": "m1", "call_recording_id": "cr1"}, "status": "completed"}
        mock_session.request.side_effect = [
            make_response(200, {"data": recording}),
            make_response(
                200,
                {
                    "data": {"raw_transcript": "Hi. Bye.", "transcript": [{"speech": "Hi."}]},
                    "pagination": {"next_cursor": "t2"},
                },
            ),
            make_response(
                200,
                {"data": {"transcript": [{"speech": "Bye."}]}, "pagination": {"next_cursor": None}},
            ),
        ]

        result = runner.invoke(
            app, ["recordings", "get", "cr1", "--meeting", "m1", "--transcript", "--all-transcript"]
        )

        assert result.exit_code == 0, result.output
        output = json.loads(result.stdout)
        assert output["status"] == "completed"
        assert output["transcript"]["raw_transcript"] == "Hi. Bye."
        assert output["transcript"]["transcript"] == [{"speech": "Hi."}, {"speech": "Bye."}]
        urls = [c.kwargs["url"] for c in mock_session.request.call_args_list]
        assert urls[1].endswith("/meetings/m1/call_recordings/cr1/transcript")

    def test_get_without_transcript(
        self, runner: CliRunner, mock_session: MagicMock, make_response: ResponseFactory
    ) -> None:
        """Test the transcript is not fetched by default."""
        mock_session.request.return_value = make_response(
            200, {"data": {"id": {"meeting_id": "m1", "call_recording_id": "cr1"}}}
        )

        result = runner.invoke(app, ["recordings", "get", "cr1", "--meeting", "m1"])

        assert result.exit_code == 0, result.output
        assert mock_session.request.call_count == 1
        assert "transcript" not in json.loads(result.stdout)
