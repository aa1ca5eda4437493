"""
Services for Attio meetings and call recordings (beta API).

Both endpoints page with opaque cursors rather than offsets.
"""

from __future__ import annotations

from typing import Any

from attio_cli.api.client import AttioClient
from attio_cli.api.pagination import paginate_cursor
from attio_cli.core.exceptions import ValueInputError
from attio_cli.services.base import BaseService, path_segment


class MeetingService(BaseService):
    """
    Service for meetings.

    Usage:
        svc = MeetingService(client)
        meetings = svc.list_meetings(linked_object="companies", linked_record_id="rec_1", all_pages=True)
    """

    @property
    def base_path(self) -> str:
        return "/meetings"

    def list_meetings(
        self,
        limit: int = 50,
        cursor: str | None = None,
        all_pages: bool = False,
        linked_object: str | None = None,
        linked_record_id: str | None = None,
        participants: str | None = None,
        sort: str | None = None,
        ends_from: str | None = None,
        starts_before: str | None = None,
        timezone: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List meetings.

        Args:
            limit: Page size
            cursor: Cursor to start from
            all_pages: Follow next_cursor until exhausted
            linked_object: Object of a linked record
            linked_record_id: Linked record ID (requires linked_object)
            participants: Comma-separated participant emails
            sort: Sort order (e.g. start_asc)
            ends_from: Only meetings ending after this ISO timestamp
            starts_before: Only meetings starting before this ISO timestamp
            timezone: Timezone for the date filters

        Returns:
            List of meetings

        Raises:
            ValueInputError: If linked_record_id is given without linked_object
        """
        if linked_record_id and not linked_object:
            raise ValueInputError("--linked-record-id requires --linked-object.")

        params: dict[str, Any] = {
            "limit": limit,
            "linked_object": linked_object,
            "linked_record_id": linked_record_id,
            "participants": participants,
            "sort": sort,
            "ends_from": ends_from,
            "starts_before": starts_before,
            "timezone": timezone,
        }

        def fetch_page(page_cursor: str | None) -> tuple[list[dict[str, Any]], str | None]:
            return self.client.get_page(self.base_path, {**params, "cursor": page_cursor})

        return paginate_cursor(fetch_page, cursor=cursor, all_pages=all_pages)


class RecordingService(BaseService):
    """
    Service for the call recordings of one meeting.

    Usage:
        svc = RecordingService(client, "mtg_1")
        recording = svc.get("rec_9")
        transcript = svc.transcript("rec_9", all_pages=True)
    """

    def __init__(self, client: AttioClient, meeting_id: str):
        super().__init__(client)
        self.meeting_id = meeting_id

    @property
    def base_path(self) -> str:
        return f"/meetings/{path_segment(self.meeting_id)}/call_recordings"

    def list_recordings(
        self,
        limit: int = 50,
        cursor: str | None = None,
        all_pages: bool = False,
    ) -> list[dict[str, Any]]:
        """List the meeting's call recordings."""

        def fetch_page(page_cursor: str | None) -> tuple[list[dict[str, Any]], str | None]:
            return self.client.get_page(self.base_path, {"limit": limit, "cursor": page_cursor})

        return paginate_cursor(fetch_page, cursor=cursor, all_pages=all_pages)

    def transcript(
        self,
        recording_id: str,
        cursor: str | None = None,
        all_pages: bool = False,
    ) -> dict[str, Any]:
        """
        Fetch a recording's transcript.

        Args:
            recording_id: Call recording ID
            cursor: Transcript cursor to start from
            all_pages: Follow next_cursor and merge every page's segments

        Returns:
            Transcript payload of the first page with "transcript" holding
            the segments of every fetched page
        """
        path = self._item_path(recording_id, "transcript")
        first_page: dict[str, Any] = {}

        def fetch_page(page_cursor: str | None) -> tuple[list[Any], str | None]:
            data, next_cursor = self.client.get_page(path, {"cursor": page_cursor})
            data = data if isinstance(data, dict) else {}
            if not first_page:
                first_page.update(data)
            segments = data.get("transcript")
            return (segments if isinstance(segments, list) else []), next_cursor

        segments = paginate_cursor(fetch_page, cursor=cursor, all_pages=all_pages)
        return {**first_page, "transcript": segments}
