"""
Client utilities for CLI commands.

Provides authenticated API client access for the current invocation.
"""

from __future__ import annotations

import typer

from attio_cli.api.client import AttioClient
from attio_cli.cli.utils.state import get_state
from attio_cli.core.config import get_settings


def get_client(ctx: typer.Context) -> AttioClient:
    """Get authenticated Attio API client.

    The API key comes from --api-key, then ATTIO_API_KEY, then the
    config file.

    Args:
        ctx: Typer context of the running command

    Returns:
        Configured AttioClient instance

    Raises:
        MissingCredentialsError: If no API key is configured
    """
    return AttioClient.from_settings(get_settings(), get_state(ctx).api_key)
