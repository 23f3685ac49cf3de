"""Auth port - API key resolution.

Presented API keys are opaque tokens. The resolver turns them into an
access level using whatever lookup the deployment configures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import AccessLevel


class ApiKeyResolverPort(Protocol):
    """Port for resolving API keys to access levels.

    Implementation: adapters/auth/config_keys.py
    """

    def resolve(self, api_key: str) -> Optional[AccessLevel]:
        """Look up the access level for ``api_key``.

        Args:
            api_key: The token presented by the client.

        Returns:
            The granted level, or None if the key is unknown.
        """
        ...
