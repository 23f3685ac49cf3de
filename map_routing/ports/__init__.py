"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and its
adapters. They enable dependency injection and make the system testable.
"""

from .auth import ApiKeyResolverPort
from .graph import GraphStorePort, RouteSolverPort

__all__ = [
    # Graph
    "GraphStorePort",
    "RouteSolverPort",
    # Auth
    "ApiKeyResolverPort",
]
