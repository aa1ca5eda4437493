"""
CLI module for attio-cli.

Provides the `attio` command-line interface.
"""

from __future__ import annotations

from attio_cli.cli.main import app, cli

__all__ = ["app", "cli"]
