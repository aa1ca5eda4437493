"""
Configuration management for attio-cli.

Handles loading configuration from environment variables, .env files,
the JSON config file, and CLI arguments with proper precedence:
--api-key flag, then ATTIO_API_KEY, then ~/.config/attio/config.json.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from attio_cli.constants import AttioAPIConfig
from attio_cli.core.exceptions import UnknownConfigKeyError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"

# CLI key name -> key stored in config.json
CONFIG_KEYS: dict[str, str] = {"api-key": "apiKey"}


# =============================================================================
# Main Settings
# =============================================================================


class AttioSettings(BaseSettings):
    """
    Main settings for attio-cli, loaded from environment and .env files.

    Environment variables (prefix ATTIO_):
        ATTIO_API_KEY, ATTIO_API_TIMEOUT, ATTIO_BASE_URL
        ATTIO_DEBUG, ATTIO_LOG_LEVEL
        ATTIO_CONFIG_DIR
    """

    model_config = SettingsConfigDict(
        env_prefix="ATTIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Attio API
    api_key: SecretStr = SecretStr("")
    api_timeout: Annotated[int, Field(default=AttioAPIConfig.DEFAULT_TIMEOUT, ge=1, le=300)]
    base_url: str = AttioAPIConfig.BASE_URL

    # Paths
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "attio")

    # Logging
    debug: bool = False
    log_level: Annotated[str, Field(default="WARNING", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")]

    @property
    def config_file(self) -> Path:
        """Path to the JSON config file."""
        return self.config_dir / CONFIG_FILENAME

    def ensure_dirs(self) -> None:
        """Create the config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def load_config_file(self) -> dict[str, Any]:
        """
        Read the JSON config file.

        A missing, unreadable or malformed file is treated as empty.
        """
        try:
            data = json.loads(self.config_file.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.debug(f"Config file {self.config_file} not loaded: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def save_config_file(self, data: dict[str, Any]) -> Path:
        """Write the JSON config file, creating its directory."""
        self.ensure_dirs()
        self.config_file.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        return self.config_file

    def set_config_value(self, key: str, value: str) -> Path:
        """
        Store a single value in the config file.

        Args:
            key: CLI key name (e.g. "api-key")
            value: Value to store

        Returns:
            Path of the written config file

        Raises:
            UnknownConfigKeyError: If key is not supported
        """
        file_key = _config_file_key(key)
        data = self.load_config_file()
        data[file_key] = value
        return self.save_config_file(data)

    def get_config_value(self, key: str) -> str | None:
        """Read a single value from the config file."""
        value = self.load_config_file().get(_config_file_key(key))
        return value if isinstance(value, str) else None

    def resolve_api_key(self, flag_value: str | None = None) -> str | None:
        """
        Resolve the API key with flag > environment > config file precedence.

        Args:
            flag_value: Value of the --api-key flag, if given

        Returns:
            The API key, or None when no source provides one
        """
        if flag_value:
            return flag_value
        env_value = self.api_key.get_secret_value()
        if env_value:
            return env_value
        return self.get_config_value("api-key")

    def has_api_key(self, flag_value: str | None = None) -> bool:
        """Check if an API key is available from any source."""
        return self.resolve_api_key(flag_value) is not None


def _config_file_key(key: str) -> str:
    if key not in CONFIG_KEYS:
        raise UnknownConfigKeyError(key, list(CONFIG_KEYS))
    return CONFIG_KEYS[key]


def mask_secret(value: str) -> str:
    """Mask a secret for display, keeping the first and last four characters."""
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:4]}...{value[-4:]}"


# =============================================================================
# Singleton Settings Access
# =============================================================================

_settings: AttioSettings | None = None


def get_settings() -> AttioSettings:
    """
    Get the global settings instance.

    Creates a new instance on first call, returns cached instance thereafter.
    """
    global _settings
    if _settings is None:
        _settings = AttioSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
