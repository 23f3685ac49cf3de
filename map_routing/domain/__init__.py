"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    AuthenticationError,
    ConfigurationError,
    InvalidGraphError,
    InvalidRequestError,
    MapNotSetError,
    MapRoutingError,
    NoRouteFoundError,
    PermissionDeniedError,
    RouteNotFoundError,
    UnknownNodeError,
)
from .models import (
    NOT_FOUND_DISTANCE,
    AccessLevel,
    Edge,
    GraphSnapshot,
    Node,
    RouteFailure,
    RouteResult,
)

__all__ = [
    # Models
    "AccessLevel",
    "Edge",
    "GraphSnapshot",
    "Node",
    "NOT_FOUND_DISTANCE",
    "RouteFailure",
    "RouteResult",
    # Errors
    "MapRoutingError",
    "RouteNotFoundError",
    "UnknownNodeError",
    "NoRouteFoundError",
    "MapNotSetError",
    "InvalidRequestError",
    "InvalidGraphError",
    "AuthenticationError",
    "PermissionDeniedError",
    "ConfigurationError",
]
