"""Graph ports - Abstractions for map storage and routing.

These protocols define the contracts for holding the current map and
computing shortest paths over a snapshot of it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import GraphSnapshot, Node, RouteResult


class GraphStorePort(Protocol):
    """Port for the single current-map slot.

    Implementation: adapters/graph/memory_store.py

    The store swaps whole maps atomically and hands out immutable
    snapshots so that readers never observe a partial replacement.
    """

    def replace(self, nodes: Sequence[Node]) -> GraphSnapshot:
        """Replace the stored map with ``nodes``.

        Args:
            nodes: The new map's nodes.

        Returns:
            The snapshot that is now current.
        """
        ...

    def snapshot(self) -> GraphSnapshot:
        """Return the current snapshot (empty if never set)."""
        ...

    @property
    def is_set(self) -> bool:
        """Whether a map has ever been stored."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: GraphSnapshot, start: str, end: str) -> RouteResult:
        """Find the shortest path, raising on unknown nodes or no path."""
        ...

    def solve_safe(self, graph: GraphSnapshot, start: str, end: str) -> RouteResult:
        """Find the shortest path, returning a NOT_FOUND result on failure."""
        ...
