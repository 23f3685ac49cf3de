"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- InMemoryGraphStore: Holds the current map in process memory
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .memory_store import InMemoryGraphStore

__all__ = ["InMemoryGraphStore", "DijkstraRouteSolver"]
