"""HTTP transport for the map service.

The API layer checks API keys, validates requests, calls MapService
and maps domain errors to HTTP status codes.
"""

from .app import create_app

__all__ = ["create_app"]
