"""
CLI command modules for attio-cli.
"""

from __future__ import annotations

from attio_cli.cli.commands import (
    comments,
    config,
    entries,
    lists,
    meetings,
    members,
    notes,
    objects,
    recordings,
    records,
    shortcuts,
    tasks,
    threads,
    webhooks,
    workspace,
)

__all__ = [
    "comments",
    "config",
    "entries",
    "lists",
    "meetings",
    "members",
    "notes",
    "objects",
    "recordings",
    "records",
    "shortcuts",
    "tasks",
    "threads",
    "webhooks",
    "workspace",
]
