"""Configuration-backed API key resolver.

Keys come from two places: an optional JSON file mapping key to access
level, and the ``api_keys`` setting (usually set through the
MAP_AUTH_API_KEYS environment variable). Keys set in the environment
override those from the file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from ...config import AuthConfig, get_config
from ...domain.errors import ConfigurationError
from ...domain.models import AccessLevel


@dataclass
class ConfigApiKeyResolver:
    """API key resolver over the configured key mapping.

    This adapter implements ApiKeyResolverPort. The key file is read
    once, on first lookup.

    Attributes:
        config: Auth configuration (inline keys, key file path)
    """

    config: AuthConfig = field(default_factory=lambda: get_config().auth)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _keys: Optional[Dict[str, AccessLevel]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(self, api_key: str) -> Optional[AccessLevel]:
        """Look up the access level for ``api_key``.

        Args:
            api_key: The token presented by the client.

        Returns:
            The granted level, or None if the key is unknown.

        Raises:
            ConfigurationError: If the key file cannot be read.
        """
        return self._load_keys().get(api_key)

    def _load_keys(self) -> Dict[str, AccessLevel]:
        if self._keys is not None:
            return self._keys

        keys: Dict[str, AccessLevel] = {}
        if self.config.keys_file is not None:
            keys.update(self._read_keys_file())
        keys.update(self.config.api_keys)

        if not keys:
            self._logger.warning("No API keys configured; every request will be rejected")
        else:
            self._logger.debug("API keys loaded", extra={"count": len(keys)})

        self._keys = keys
        return keys

    def _read_keys_file(self) -> Dict[str, AccessLevel]:
        path = self.config.keys_file
        assert path is not None

        try:
            with path.open(encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, dict):
                raise ValueError("expected a JSON object of key -> level")
            return {str(key): AccessLevel(level) for key, level in raw.items()}
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Failed to read API keys file {path}",
                setting_name="keys_file",
                cause=e,
            )

    def clear_cache(self) -> None:
        """Forget loaded keys so the next lookup re-reads configuration."""
        self._keys = None
        self._logger.debug("API key cache cleared")
