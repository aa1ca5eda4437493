"""
Webhook commands.

Subscriptions come either from repeated ``--event`` flags (sharing one
optional ``--filter-json``) or from a full ``--subscriptions`` array.
"""

from __future__ import annotations

from typing import Annotated, Any

import typer

from attio_cli.cli.utils import get_client, render_list, render_single
from attio_cli.cli.utils.options import DEFAULT_LIMIT, LimitOption, OffsetOption, YesOption
from attio_cli.cli.utils.state import output_format
from attio_cli.constants import WEBHOOK_EVENT_TYPES
from attio_cli.formatters.output import confirm_action, output_list, print_success
from attio_cli.services.webhooks import WebhookService, build_subscriptions

app = typer.Typer(help="Manage webhooks")

WEBHOOK_COLUMNS = ["id", "target_url", "status", "subscriptions", "created_at"]

EventOption = Annotated[
    list[str] | None,
    typer.Option("--event", help='Event type (repeatable). See "attio webhooks events"'),
]
SubscriptionFilterOption = Annotated[
    str | None,
    typer.Option("--filter-json", help="JSON filter applied to every --event subscription"),
]
SubscriptionsOption = Annotated[
    str | None,
    typer.Option("--subscriptions", help="Full subscriptions JSON array or @file (overrides --event)"),
]


def _get_service(ctx: typer.Context) -> WebhookService:
    """Get webhook service."""
    return WebhookService(get_client(ctx))


def _flatten_webhook(webhook: dict[str, Any]) -> dict[str, Any]:
    subscriptions = webhook.get("subscriptions")
    return {
        "id": (webhook.get("id") or {}).get("webhook_id", ""),
        "target_url": webhook.get("target_url") or "",
        "status": webhook.get("status") or "",
        "subscriptions": len(subscriptions) if isinstance(subscriptions, list) else 0,
        "created_at": webhook.get("created_at") or "",
    }


@app.command("events")
def list_events(ctx: typer.Context) -> None:
    """List the supported webhook event types."""
    events = [{"event_type": event_type} for event_type in WEBHOOK_EVENT_TYPES]
    output_list(events, output_format(ctx), columns=["event_type"], id_field="event_type")


@app.command("list")
def list_webhooks(
    ctx: typer.Context,
    limit: LimitOption = DEFAULT_LIMIT,
    offset: OffsetOption = 0,
) -> None:
    """List webhooks."""
    webhooks = _get_service(ctx).list(limit=limit, offset=offset)
    render_list(ctx, webhooks, _flatten_webhook, columns=WEBHOOK_COLUMNS)


@app.command("get")
def get_webhook(
    ctx: typer.Context,
    webhook_id: Annotated[str, typer.Argument(help="Webhook ID")],
) -> None:
    """Get a webhook by ID."""
    render_single(ctx, _get_service(ctx).get(webhook_id), _flatten_webhook)


@app.command("create")
def create_webhook(
    ctx: typer.Context,
    target_url: Annotated[str, typer.Option("--target-url", help="Destination URL (https only)")],
    event: EventOption = None,
    filter_json: SubscriptionFilterOption = None,
    subscriptions: SubscriptionsOption = None,
) -> None:
    """Create a webhook."""
    subs = build_subscriptions(event, filter_json, subscriptions)
    render_single(ctx, _get_service(ctx).create_webhook(target_url, subs))


@app.command("update")
def update_webhook(
    ctx: typer.Context,
    webhook_id: Annotated[str, typer.Argument(help="Webhook ID")],
    target_url: Annotated[
        str | None, typer.Option("--target-url", help="New destination URL (https only)")
    ] = None,
    event: EventOption = None,
    filter_json: SubscriptionFilterOption = None,
    subscriptions: SubscriptionsOption = None,
) -> None:
    """Update a webhook's target URL and/or subscriptions."""
    subs = None
    if subscriptions or filter_json or event:
        subs = build_subscriptions(event, filter_json, subscriptions)
    render_single(ctx, _get_service(ctx).update_webhook(webhook_id, target_url=target_url, subscriptions=subs))


@app.command("delete")
def delete_webhook(
    ctx: typer.Context,
    webhook_id: Annotated[str, typer.Argument(help="Webhook ID")],
    yes: YesOption = False,
) -> None:
    """Delete a webhook."""
    if not confirm_action(f"Delete webhook {webhook_id}?", yes):
        return
    _get_service(ctx).delete(webhook_id)
    print_success("Deleted.")
