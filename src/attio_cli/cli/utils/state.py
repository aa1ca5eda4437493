"""
CLI state management.

Holds the global flags parsed by the root callback. The state is stored
in ``ctx.obj`` so every subcommand can reach it through its context.
"""

from __future__ import annotations

from dataclasses import dataclass

import typer

from attio_cli.formatters.output import OutputFormat, detect_format


@dataclass(frozen=True)
class CLIState:
    """
    Immutable state object for CLI-wide options.

    Attributes:
        api_key: Value of --api-key (overrides env and config file)
        json: Force JSON output
        table: Force table output
        csv: Force CSV output
        quiet: Print IDs only
        debug: Debug logging enabled
    """

    api_key: str | None = None
    json: bool = False
    table: bool = False
    csv: bool = False
    quiet: bool = False
    debug: bool = False

    @property
    def output_format(self) -> OutputFormat:
        """Output format resolved from the flags and stdout."""
        return detect_format(json=self.json, table=self.table, csv=self.csv, quiet=self.quiet)


def get_state(ctx: typer.Context) -> CLIState:
    """Return the CLI state from the context, or defaults when unset."""
    state = ctx.find_object(CLIState)
    return state if state is not None else CLIState()


def output_format(ctx: typer.Context) -> OutputFormat:
    """Output format for the current invocation."""
    return get_state(ctx).output_format
