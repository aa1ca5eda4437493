"""
Core module for attio-cli.

Contains configuration management and the exception hierarchy.
"""

from __future__ import annotations

from attio_cli.core.config import AttioSettings, get_settings, reset_settings
from attio_cli.core.exceptions import (
    APIError,
    AttioError,
    AuthenticationError,
    ConfigurationError,
    InputError,
)

__all__ = [
    # Settings
    "get_settings",
    "reset_settings",
    "AttioSettings",
    # Exceptions
    "AttioError",
    "AuthenticationError",
    "APIError",
    "ConfigurationError",
    "InputError",
]
