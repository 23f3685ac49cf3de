"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- MAP_AUTH_API_KEYS='{"secret": "FS_ReadWrite"}'
- MAP_AUTH_KEYS_FILE=/etc/map-routing/keys.json
- MAP_SERVER_PORT=8080
- MAP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.models import AccessLevel


class AuthConfig(BaseSettings):
    """API key configuration.

    Environment variables prefixed with MAP_AUTH_.
    """

    model_config = SettingsConfigDict(env_prefix="MAP_AUTH_")

    api_keys: Dict[str, AccessLevel] = Field(default_factory=dict)
    keys_file: Optional[Path] = None
    header_name: str = "X-Api-Key"


class ServerConfig(BaseSettings):
    """HTTP server configuration.

    Environment variables prefixed with MAP_SERVER_.
    """

    model_config = SettingsConfigDict(env_prefix="MAP_SERVER_")

    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with MAP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="MAP_LOG_")

    level: str = "INFO"
    structured: bool = False  # Set True for JSON lines


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.server.port)
        print(config.auth.header_name)

    Environment variables prefixed with MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="MAP_")

    auth: AuthConfig = Field(default_factory=AuthConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
