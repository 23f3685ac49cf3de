"""Request and response bodies for the map API."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from ..domain.models import Edge, Node


class EdgeSchema(BaseModel):
    """Outgoing edge as sent over the wire."""

    target: str
    distance: int

    @classmethod
    def from_domain(cls, edge: Edge) -> EdgeSchema:
        return cls(target=edge.target, distance=edge.distance)


class NodeSchema(BaseModel):
    """Node as sent over the wire, with its outgoing edges in order."""

    name: str
    edges: List[EdgeSchema] = Field(default_factory=list)

    def to_domain(self) -> Node:
        return Node(
            name=self.name,
            edges=tuple(Edge(target=e.target, distance=e.distance) for e in self.edges),
        )

    @classmethod
    def from_domain(cls, node: Node) -> NodeSchema:
        return cls(name=node.name, edges=[EdgeSchema.from_domain(e) for e in node.edges])


class HealthSchema(BaseModel):
    status: str = "ok"
    state: str
    nodes: int
