"""
Service for Attio webhooks.

Manages webhook registrations only; receiving deliveries is up to the
target server.
"""

from __future__ import annotations

from typing import Any

from attio_cli.constants import WEBHOOK_EVENT_TYPES
from attio_cli.core.exceptions import ValueInputError
from attio_cli.services.base import BaseService
from attio_cli.utils.values import load_json_argument


def validate_events(events: list[str]) -> list[str]:
    """
    Check event types against the supported catalogue.

    Raises:
        ValueInputError: If any event type is unsupported
    """
    invalid = [e for e in events if e not in WEBHOOK_EVENT_TYPES]
    if invalid:
        raise ValueInputError(f"Unsupported webhook event type(s): {', '.join(invalid)}")
    return list(events)


def build_subscriptions(
    events: list[str] | None = None,
    filter_json: str | None = None,
    subscriptions: str | None = None,
) -> list[dict[str, Any]]:
    """
    Build webhook subscriptions from command-line options.

    A full --subscriptions JSON array (inline or @file) wins; otherwise
    one subscription is built per --event, all sharing the optional
    --filter-json filter.

    Raises:
        ValueInputError: If nothing usable was given
        json.JSONDecodeError: If a JSON option is malformed
    """
    if subscriptions:
        parsed = load_json_argument(subscriptions)
        if not isinstance(parsed, list):
            raise ValueInputError("--subscriptions must be a JSON array or @file containing a JSON array.")
        return parsed

    event_types = validate_events(events or [])
    if not event_types:
        raise ValueInputError("Provide at least one --event or --subscriptions for webhook subscriptions.")

    filter = load_json_argument(filter_json) if filter_json else None
    return [{"event_type": event_type, "filter": filter} for event_type in event_types]


class WebhookService(BaseService):
    """
    Service for managing webhooks.

    Usage:
        svc = WebhookService(client)
        hook = svc.create_webhook("https://example.com/hook", build_subscriptions(["record.created"]))
    """

    @property
    def base_path(self) -> str:
        return "/webhooks"

    def create_webhook(self, target_url: str, subscriptions: list[dict[str, Any]]) -> dict[str, Any]:
        """Register a webhook."""
        return self.create({"target_url": target_url, "subscriptions": subscriptions})

    def update_webhook(
        self,
        webhook_id: str,
        target_url: str | None = None,
        subscriptions: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """
        Update a webhook's target URL and/or subscriptions.

        Only the given fields are sent.

        Raises:
            ValueInputError: If neither field is given
        """
        data: dict[str, Any] = {}
        if target_url:
            data["target_url"] = target_url
        if subscriptions is not None:
            data["subscriptions"] = subscriptions
        if not data:
            raise ValueInputError("Nothing to update. Provide --target-url and/or subscription options.")
        return self.update(webhook_id, data)
