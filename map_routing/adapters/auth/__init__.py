"""Auth adapters - Implementations of the ApiKeyResolverPort.

Available implementations:
- ConfigApiKeyResolver: Resolves keys from the application configuration
"""

from .config_keys import ConfigApiKeyResolver

__all__ = ["ConfigApiKeyResolver"]
