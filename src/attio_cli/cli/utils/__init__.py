"""
CLI utility modules for shared functionality.

Provides common utilities used across CLI commands:
- client: Authenticated API client access
- state: Global flags carried on the Typer context
- options: Shared option declarations
- render: Raw/flattened output dispatch
"""

from attio_cli.cli.utils.client import get_client
from attio_cli.cli.utils.render import render_list, render_single
from attio_cli.cli.utils.state import CLIState, get_state, output_format

__all__ = [
    # Client
    "get_client",
    # State
    "CLIState",
    "get_state",
    "output_format",
    # Rendering
    "render_list",
    "render_single",
]
