"""
Constants and default values for attio-cli.

This module provides centralized configuration for:
- Attio API base URL, timeouts and retry policy
- Pagination page size and safety ceiling
- Process exit codes
- Webhook event types
"""

from __future__ import annotations

from typing import Final

# =============================================================================
# Attio API Configuration
# =============================================================================


class AttioAPIConfig:
    """Attio REST API configuration constants."""

    BASE_URL: Final[str] = "https://api.attio.com/v2"
    WEB_APP_URL: Final[str] = "https://app.attio.com"
    DEVELOPER_SETTINGS_URL: Final[str] = "https://app.attio.com/settings/developers"

    DEFAULT_TIMEOUT: Final[int] = 30

    # 429 handling
    MAX_RETRIES: Final[int] = 3
    INITIAL_BACKOFF_SECONDS: Final[float] = 1.0
    MIN_BACKOFF_SECONDS: Final[float] = 0.1


class PaginationConfig:
    """Pagination defaults shared by list commands."""

    # Page size used when fetching everything with --all
    PAGE_SIZE: Final[int] = 500

    # Hard stop for --all loops if the server never returns a short page
    MAX_PAGINATED_ITEMS: Final[int] = 50_000

    DEFAULT_LIMIT: Final[int] = 25
    DEFAULT_CURSOR_LIMIT: Final[int] = 50


# =============================================================================
# Exit Codes
# =============================================================================


class ExitCode:
    """Process exit codes used by the CLI."""

    SUCCESS: Final[int] = 0
    GENERAL_ERROR: Final[int] = 1
    AUTH_ERROR: Final[int] = 2
    NOT_FOUND: Final[int] = 3
    VALIDATION_ERROR: Final[int] = 4
    RATE_LIMITED: Final[int] = 5


# =============================================================================
# Webhooks
# =============================================================================

WEBHOOK_EVENT_TYPES: Final[tuple[str, ...]] = (
    "call-recording.created",
    "comment.created",
    "comment.resolved",
    "comment.unresolved",
    "comment.deleted",
    "list.created",
    "list.updated",
    "list.deleted",
    "list-attribute.created",
    "list-attribute.updated",
    "list-entry.created",
    "list-entry.updated",
    "list-entry.deleted",
    "object-attribute.created",
    "object-attribute.updated",
    "note.created",
    "note-content.updated",
    "note.updated",
    "note.deleted",
    "record.created",
    "record.merged",
    "record.updated",
    "record.deleted",
    "task.created",
    "task.updated",
    "task.deleted",
    "workspace-member.created",
)

# Record-backed objects that get a top-level shortcut command
STANDARD_OBJECTS: Final[tuple[tuple[str, str], ...]] = (
    ("people", "person"),
    ("companies", "company"),
    ("deals", "deal"),
    ("users", "user"),
    ("workspaces", "workspace"),
)
