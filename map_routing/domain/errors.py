"""Typed domain errors for the map routing service.

All errors inherit from MapRoutingError and can optionally wrap a root
cause exception for debugging. The API layer maps each error type to an
HTTP status code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MapRoutingError(Exception):
    """Base error for the map routing domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class RouteNotFoundError(MapRoutingError):
    """A route query produced no path.

    Attributes:
        start: Name of the start node
        end: Name of the end node
        reason: Why no path was produced, if known
    """

    start: str = ""
    end: str = ""
    reason: str = ""


@dataclass
class UnknownNodeError(RouteNotFoundError):
    """A route endpoint is not a node of the current map.

    Attributes:
        node_name: The name that was not found
    """

    node_name: str = ""


@dataclass
class NoRouteFoundError(RouteNotFoundError):
    """Both endpoints exist but no path connects them."""


@dataclass
class MapNotSetError(MapRoutingError):
    """No map (or an empty one) is currently stored."""


@dataclass
class InvalidRequestError(MapRoutingError):
    """A request is missing parameters or carries a malformed body."""


@dataclass
class InvalidGraphError(InvalidRequestError):
    """The submitted graph is empty or malformed."""


@dataclass
class AuthenticationError(MapRoutingError):
    """The API key is missing or not recognised."""


@dataclass
class PermissionDeniedError(MapRoutingError):
    """The API key does not grant the access level an operation needs.

    Attributes:
        required: Access level the operation requires
        granted: Access level resolved from the presented key
    """

    required: str = ""
    granted: str = ""


@dataclass
class ConfigurationError(MapRoutingError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
