"""Map service - The graph store component.

This service is the only entry point the transport layer uses. It owns
the set/get/shortest-path operations and delegates storage and routing
to the injected adapters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from ..domain.models import Node, RouteResult
from ..ports.graph import GraphStorePort, RouteSolverPort


@dataclass
class MapService:
    """Service holding the current map and answering route queries.

    Attributes:
        store: Holds the current map snapshot
        route_solver: Computes shortest paths over a snapshot
    """

    store: GraphStorePort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def set_map(self, nodes: Sequence[Node]) -> None:
        """Replace the whole map with ``nodes``.

        The replacement is atomic: readers see either the old map or
        the new one. Later changes to ``nodes`` do not affect the store.
        """
        self.store.replace(list(nodes))

    def get_map(self) -> List[Node]:
        """Return a copy of the current map's nodes.

        An unset map and an empty map both return ``[]``.
        """
        return list(self.store.snapshot().nodes)

    def shortest_path(self, start: str, end: str) -> RouteResult:
        """Compute the shortest path between two node names.

        Args:
            start: Name of the start node.
            end: Name of the end node.

        Returns:
            RouteResult with the path and distance. If either node is
            unknown or no path exists, the result has an empty path,
            distance -1 and ``failure`` set to the reason.
        """
        graph = self.store.snapshot()
        route = self.route_solver.solve_safe(graph, start, end)

        if not route.is_found:
            self._logger.info(
                "Route query not found",
                extra={"start": start, "end": end, "reason": route.failure.name},
            )
        return route

    def map_state(self) -> str:
        """Describe the stored map as ``unset``, ``empty`` or ``loaded``."""
        if not self.store.is_set:
            return "unset"
        return "empty" if self.store.snapshot().is_empty else "loaded"
