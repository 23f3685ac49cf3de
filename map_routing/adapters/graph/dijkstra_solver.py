"""Dijkstra Route Solver adapter.

Computes single-source shortest paths over a GraphSnapshot with a binary
heap. Edges whose target is not a node of the snapshot are skipped.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ...domain.errors import NoRouteFoundError, UnknownNodeError
from ...domain.models import GraphSnapshot, RouteFailure, RouteResult


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort. Weights are assumed
    non-negative; negative weights are accepted but give undefined
    results.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: GraphSnapshot, start: str, end: str) -> RouteResult:
        """Find the shortest path between two nodes.

        Args:
            graph: Snapshot of the map to search.
            start: Name of the start node.
            end: Name of the end node.

        Returns:
            RouteResult with the path and its total distance.

        Raises:
            UnknownNodeError: If start or end is not in the map.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug("Solving route", extra={"start": start, "end": end})

        for name in (start, end):
            if name not in graph:
                raise UnknownNodeError(
                    f"Node not in map: {name}",
                    start=start,
                    end=end,
                    reason=RouteFailure.UNKNOWN_NODE.name,
                    node_name=name,
                )

        found = self._dijkstra(graph, start, end)
        if found is None:
            self._logger.warning(
                "No route found",
                extra={"start": start, "end": end},
            )
            raise NoRouteFoundError(
                f"No path from {start} to {end}",
                start=start,
                end=end,
                reason=RouteFailure.NO_PATH.name,
            )

        path, distance = found
        self._logger.info(
            "Route found",
            extra={"start": start, "end": end, "stops": len(path), "distance": distance},
        )
        return RouteResult(path=tuple(path), distance=distance)

    def solve_safe(self, graph: GraphSnapshot, start: str, end: str) -> RouteResult:
        """Find the shortest path, returning a NOT_FOUND result on failure.

        Like solve(), but reports failures through ``RouteResult.failure``
        (with distance -1 and an empty path) instead of raising.
        """
        try:
            return self.solve(graph, start, end)
        except UnknownNodeError:
            return RouteResult.not_found(RouteFailure.UNKNOWN_NODE)
        except NoRouteFoundError:
            return RouteResult.not_found(RouteFailure.NO_PATH)

    def _dijkstra(
        self, graph: GraphSnapshot, start: str, end: str
    ) -> Optional[Tuple[List[str], int]]:
        """Core Dijkstra loop with predecessor tracking.

        Heap entries are (distance, sequence, name); the sequence number
        breaks ties in push order so results are reproducible.
        """
        index = graph.index
        distances: Dict[str, Optional[int]] = {name: None for name in index}
        previous: Dict[str, str] = {}
        distances[start] = 0

        counter = itertools.count()
        heap: List[Tuple[int, int, str]] = [(0, next(counter), start)]
        visited: set[str] = set()

        while heap:
            current_distance, _, u = heapq.heappop(heap)

            if u in visited:
                continue
            visited.add(u)

            if u == end:
                break

            for edge in index[u].edges:
                v = edge.target
                # Dangling targets and finalized nodes are never relaxed,
                # which also keeps the predecessor chain acyclic.
                if v not in index or v in visited:
                    continue

                new_distance = current_distance + edge.distance
                best = distances[v]
                if best is None or new_distance < best:
                    distances[v] = new_distance
                    previous[v] = u
                    heapq.heappush(heap, (new_distance, next(counter), v))

        final = distances[end]
        if final is None:
            return None

        path: List[str] = [end]
        current = end
        while current != start:
            current = previous[current]
            path.append(current)

        path.reverse()
        return path, final
