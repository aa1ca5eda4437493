"""
Configuration management commands.

Provides commands for storing the API key and viewing attio configuration.
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from attio_cli.cli.utils import get_state
from attio_cli.constants import AttioAPIConfig
from attio_cli.core.config import CONFIG_KEYS, get_settings, mask_secret
from attio_cli.formatters.output import err_console, print_success

app = typer.Typer(help="Manage attio configuration")
console = Console()

KeyArgument = Annotated[str, typer.Argument(help=f"Config key ({', '.join(CONFIG_KEYS)})")]


@app.command("set")
def set_value(
    key: KeyArgument,
    value: Annotated[str, typer.Argument(help="Value to store")],
) -> None:
    """Set a config value (e.g. attio config set api-key <key>)."""
    path = get_settings().set_config_value(key, value)
    print_success(f"{key} saved to {path}")


@app.command("get")
def get_value(ctx: typer.Context, key: KeyArgument) -> None:
    """Get a config value; secrets are masked."""
    settings = get_settings()
    if key == "api-key":
        value = settings.resolve_api_key(get_state(ctx).api_key)
        value = mask_secret(value) if value else None
    else:
        value = settings.get_config_value(key)

    if value is None:
        err_console.print(f"[dim]No {key} configured.[/dim]")
        return
    typer.echo(value)


@app.command("path")
def show_path() -> None:
    """Print the config file location."""
    typer.echo(str(get_settings().config_file))


@app.command("show")
def show_config(ctx: typer.Context) -> None:
    """Show current configuration."""
    settings = get_settings()
    api_key = settings.resolve_api_key(get_state(ctx).api_key)

    console.print("\n[bold cyan]General Settings[/bold cyan]")
    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="dim")
    table.add_column("Value")

    table.add_row("Config file", str(settings.config_file))
    table.add_row("Debug mode", str(settings.debug))
    table.add_row("Log level", settings.log_level)
    console.print(table)

    console.print("\n[bold cyan]Attio API[/bold cyan]")
    api_table = Table(show_header=False, box=None)
    api_table.add_column("Setting", style="dim")
    api_table.add_column("Value")

    api_table.add_row("Base URL", settings.base_url)
    api_table.add_row("API key", mask_secret(api_key) if api_key else "[dim]Not set[/dim]")
    api_table.add_row("API timeout", f"{settings.api_timeout}s")
    console.print(api_table)

    console.print()
    if api_key:
        console.print("[green]✓ API key configured[/green]")
    else:
        console.print("[yellow]⚠ API key not configured[/yellow]")
        console.print("\nSet one of:")
        console.print("  export ATTIO_API_KEY=your-key")
        console.print("  attio config set api-key your-key")
        console.print(f"\nCreate a key at {AttioAPIConfig.DEVELOPER_SETTINGS_URL}")
