"""
Workspace-level commands registered on the root app.

Provides ``whoami``, ``open`` and the ``init`` setup wizard.
"""

from __future__ import annotations

import sys
from typing import Annotated, Any
from urllib.parse import quote

import typer
from rich.console import Console

from attio_cli.api.client import AttioClient
from attio_cli.cli.utils import get_client, get_state, render_single
from attio_cli.constants import AttioAPIConfig, ExitCode
from attio_cli.core.config import get_settings
from attio_cli.core.exceptions import AttioError, AuthenticationError
from attio_cli.services.records import RecordService
from attio_cli.services.workspace import WorkspaceService

# Status output goes to stderr so stdout stays clean for scripts
console = Console(stderr=True)


def _flatten_self(info: dict[str, Any]) -> dict[str, Any]:
    return {
        "workspace_id": info.get("workspace_id") or "",
        "workspace_name": info.get("workspace_name") or "",
        "workspace_slug": info.get("workspace_slug") or "",
        "authorized_by": info.get("authorized_by_workspace_member_id") or "",
        "scope": info.get("scope") or "",
    }


def whoami(ctx: typer.Context) -> None:
    """Show the current workspace and the token's authorizing member."""
    info = WorkspaceService(get_client(ctx)).whoami()
    render_single(ctx, info, _flatten_self, id_field="workspace_id")


def object_url(workspace_slug: str, object: str) -> str:
    """Web app URL of an object's record listing."""
    return f"{AttioAPIConfig.WEB_APP_URL}/{quote(workspace_slug, safe='')}/{quote(object, safe='')}"


def open_in_browser(
    ctx: typer.Context,
    object: Annotated[str, typer.Argument(help="Object slug (e.g. companies)")],
    record_id: Annotated[str | None, typer.Argument(help="Record ID")] = None,
) -> None:
    """Open an object or record in the Attio web app."""
    client = get_client(ctx)
    if record_id:
        url = RecordService(client, object).get(record_id).get("web_url")
        if not url:
            raise AttioError("Record has no web_url.", {"record_id": record_id})
    else:
        slug = WorkspaceService(client).whoami().get("workspace_slug") or ""
        url = object_url(slug, object)

    # Print the URL when no browser could be started
    if typer.launch(url) != 0:
        typer.echo(url)


def _clean_key(value: str) -> str:
    return value.strip().strip("'\"")


def _print_manual_setup() -> None:
    typer.echo("Non-interactive environment detected. To configure manually:\n")
    typer.echo("  export ATTIO_API_KEY=your_key")
    typer.echo("  # or")
    typer.echo("  attio config set api-key your_key")
    typer.echo("  # or")
    typer.echo("  attio --api-key your_key init\n")
    typer.echo(f"Get your API key at: {AttioAPIConfig.DEVELOPER_SETTINGS_URL}")


def init(ctx: typer.Context) -> None:
    """Interactive setup: verify an API key and save it to the config file."""
    settings = get_settings()
    api_key = get_state(ctx).api_key

    if not api_key:
        if not sys.stdin.isatty():
            _print_manual_setup()
            return

        if settings.get_config_value("api-key"):
            if not typer.confirm("An API key is already configured. Overwrite?", default=False, err=True):
                console.print("[dim]Setup cancelled.[/dim]")
                return

        console.print("\n[bold]Attio CLI Setup[/bold]\n")
        console.print(f"You'll need an API key from [cyan]{AttioAPIConfig.DEVELOPER_SETTINGS_URL}[/cyan]\n")
        api_key = typer.prompt("Paste your API key", hide_input=True, err=True)

    api_key = _clean_key(api_key)
    if not api_key:
        console.print("[red]No API key provided.[/red]")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    console.print("[dim]Verifying...[/dim]")
    client = AttioClient(api_key, base_url=settings.base_url, timeout=settings.api_timeout)
    try:
        info = WorkspaceService(client).whoami()
    except AuthenticationError:
        console.print("[red]✗ Invalid API key.[/red]")
        console.print(f"Double-check at: [cyan]{AttioAPIConfig.DEVELOPER_SETTINGS_URL}[/cyan]")
        raise typer.Exit(ExitCode.AUTH_ERROR)

    name = info.get("workspace_name") or "your workspace"
    slug = info.get("workspace_slug")
    console.print(f'[green]✓[/green] Connected to [bold]"{name}"[/bold]{f" ({slug})" if slug else ""}')

    path = settings.set_config_value("api-key", api_key)
    console.print(f"API key saved to [dim]{path}[/dim]")
    console.print("\nDone! Try [cyan]attio whoami[/cyan] or [cyan]attio companies list[/cyan] to get started.")
