"""
Main CLI entry point for attio-cli.

Provides the `attio` command with subcommands for:
- whoami, open, init, version: Workspace and setup
- config: Configuration management
- objects, attributes: Data model
- records: Records of any object
- people, companies, deals, users, workspaces: Record shortcuts
- lists, entries: Lists and list entries
- tasks, notes, comments, threads: Collaboration
- meetings, recordings: Meetings and call recordings (beta API)
- webhooks: Webhook management
- members: Workspace members
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any

import typer
from rich.logging import RichHandler
from rich.markup import escape
from typer.core import TyperGroup

from attio_cli import __version__
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
    tasks,
    threads,
    webhooks,
    workspace,
)
from attio_cli.cli.commands.shortcuts import SHORTCUT_APPS
from attio_cli.cli.utils.state import CLIState
from attio_cli.constants import AttioAPIConfig, ExitCode
from attio_cli.core.config import get_settings
from attio_cli.core.exceptions import (
    AttioError,
    AuthenticationError,
    InvalidCredentialsError,
)
from attio_cli.formatters.output import err_console

logger = logging.getLogger(__name__)


def _fail(message: str, exit_code: int) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    logger.debug("Command failed", exc_info=True)
    return typer.Exit(exit_code)


class AttioGroup(TyperGroup):
    """
    Root command group that maps errors to exit codes.

    Every subcommand runs inside this group's invoke, so errors are caught
    once here: attio errors use their own exit code, malformed JSON input
    is a validation error and file errors are general errors.
    """

    def invoke(self, ctx: typer.Context) -> Any:
        try:
            return super().invoke(ctx)
        except AuthenticationError as e:
            exit_exc = _fail(str(e), e.exit_code)
            if isinstance(e, InvalidCredentialsError):
                err_console.print("Check your API key, or create a new one at:")
            else:
                err_console.print("Create an API key at:")
            err_console.print(f"  [cyan]{AttioAPIConfig.DEVELOPER_SETTINGS_URL}[/cyan]")
            raise exit_exc from e
        except AttioError as e:
            raise _fail(str(e), e.exit_code) from e
        except json.JSONDecodeError as e:
            raise _fail(f"Invalid JSON: {e}", ExitCode.VALIDATION_ERROR) from e
        except OSError as e:
            raise _fail(str(e), ExitCode.GENERAL_ERROR) from e


# Main CLI app
app = typer.Typer(
    name="attio",
    cls=AttioGroup,
    help="CLI for the Attio CRM API - built for scripts, agents and terminals",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"attio version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    api_key: Annotated[
        str | None,
        typer.Option("--api-key", help="Override API key", show_default=False),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Force JSON output")] = False,
    table: Annotated[bool, typer.Option("--table", help="Force table output")] = False,
    csv: Annotated[bool, typer.Option("--csv", help="Force CSV output")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only output IDs")] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            envvar="ATTIO_DEBUG",
            help="Log requests and responses to stderr",
        ),
    ] = False,
) -> None:
    """
    attio - Attio CRM from the command line.

    Output is a table on a terminal and JSON when piped.
    """
    settings = get_settings()
    if debug:
        settings.debug = True

    # Configure logging
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=settings.debug, rich_tracebacks=True)],
        force=True,
    )
    logging.captureWarnings(True)

    ctx.obj = CLIState(
        api_key=api_key,
        json=json_output,
        table=table,
        csv=csv,
        quiet=quiet,
        debug=settings.debug,
    )


# Workspace and setup
app.command("whoami")(workspace.whoami)
app.command("open")(workspace.open_in_browser)
app.command("init")(workspace.init)

# Register command groups
app.add_typer(config.app, name="config", help="Manage attio configuration")
app.add_typer(objects.app, name="objects", help="Manage workspace objects")
app.add_typer(objects.attributes_app, name="attributes", help="Manage object attributes")
app.add_typer(records.app, name="records", help="Manage records in any object")
for object_slug, shortcut_app in SHORTCUT_APPS.items():
    app.add_typer(shortcut_app, name=object_slug)
app.add_typer(lists.app, name="lists", help="Manage lists")
app.add_typer(entries.app, name="entries", help="Manage list entries")
app.add_typer(tasks.app, name="tasks", help="Manage tasks")
app.add_typer(notes.app, name="notes", help="Manage notes")
app.add_typer(comments.app, name="comments", help="Manage comments on records")
app.add_typer(threads.app, name="threads", help="Manage comment threads")
app.add_typer(meetings.app, name="meetings", help="Manage meetings (beta API)")
app.add_typer(recordings.app, name="recordings", help="Manage call recordings (beta API)")
app.add_typer(webhooks.app, name="webhooks", help="Manage webhooks")
app.add_typer(members.app, name="members", help="Manage workspace members")


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"attio version {__version__}")


def cli() -> None:
    """Entry point for the attio command."""
    app()


if __name__ == "__main__":
    cli()
