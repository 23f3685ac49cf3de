"""Immutable domain models for the map routing service.

All models are frozen dataclasses with slots. A stored map is never
mutated after it is built, which is what lets readers traverse it
without holding a lock.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

NOT_FOUND_DISTANCE = -1


class AccessLevel(str, Enum):
    """Capability tier attached to an API key."""

    READ = "FS_Read"
    READ_WRITE = "FS_ReadWrite"

    def grants(self, required: AccessLevel) -> bool:
        """Check whether this level satisfies ``required``.

        Read-write implies read; read only satisfies read.
        """
        if required is AccessLevel.READ_WRITE:
            return self is AccessLevel.READ_WRITE
        return True


class RouteFailure(Enum):
    """Why a route query produced no path."""

    UNKNOWN_NODE = auto()
    NO_PATH = auto()


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted connection to a node referenced by name.

    Attributes:
        target: Name of the destination node (may not exist in the map)
        distance: Weight of the edge
    """

    target: str
    distance: int


@dataclass(frozen=True, slots=True)
class Node:
    """A named vertex with its ordered outgoing edges."""

    name: str
    edges: tuple[Edge, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Callers may pass a list; keep a private immutable copy.
        object.__setattr__(self, "edges", tuple(self.edges))


@dataclass(frozen=True, slots=True)
class GraphSnapshot:
    """Point-in-time, read-only view of a stored map.

    Attributes:
        nodes: Nodes in first-seen order, one per distinct name
        index: Node lookup by name (last supplied node wins on duplicates)
    """

    nodes: tuple[Node, ...] = field(default_factory=tuple)
    index: Mapping[str, Node] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_nodes(cls, nodes: Iterable[Node]) -> GraphSnapshot:
        """Build a snapshot from a node sequence."""
        index: dict[str, Node] = {}
        for node in nodes:
            index[node.name] = node
        return cls(nodes=tuple(index.values()), index=MappingProxyType(index))

    def __contains__(self, name: object) -> bool:
        return name in self.index

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def is_empty(self) -> bool:
        return not self.nodes


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query.

    Attributes:
        path: Node names from start to end inclusive (empty if not found)
        distance: Total weight of the path, or -1 if not found
        failure: Reason no path was produced, None on success
    """

    path: tuple[str, ...]
    distance: int
    failure: Optional[RouteFailure] = None

    @classmethod
    def not_found(cls, reason: RouteFailure) -> RouteResult:
        return cls(path=(), distance=NOT_FOUND_DISTANCE, failure=reason)

    @property
    def is_found(self) -> bool:
        """Check if a path was produced."""
        return self.failure is None

    @property
    def route_label(self) -> str:
        """Node names concatenated in travel order, without separator."""
        return "".join(self.path)
