"""
Service modules for attio-cli.

Contains resource services built on top of the API client, one per
Attio resource family.
"""

from __future__ import annotations

from attio_cli.services.base import BaseService
from attio_cli.services.comments import CommentService, ThreadService
from attio_cli.services.entries import EntryService
from attio_cli.services.lists import ListService
from attio_cli.services.meetings import MeetingService, RecordingService
from attio_cli.services.notes import NoteService
from attio_cli.services.objects import AttributeService, ObjectService
from attio_cli.services.records import RecordService, search_records
from attio_cli.services.tasks import TaskService
from attio_cli.services.webhooks import WebhookService, build_subscriptions
from attio_cli.services.workspace import WorkspaceService

__all__ = [  # noqa: RUF022
    # Base
    "BaseService",
    # Records and lists
    "RecordService",
    "search_records",
    "EntryService",
    "ListService",
    # Schema
    "ObjectService",
    "AttributeService",
    # Collaboration
    "NoteService",
    "TaskService",
    "CommentService",
    "ThreadService",
    # Meetings (beta)
    "MeetingService",
    "RecordingService",
    # Webhooks
    "WebhookService",
    "build_subscriptions",
    # Workspace
    "WorkspaceService",
]
