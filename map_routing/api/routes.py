"""Map endpoints.

Routes mirror the service operations: replace the map, read it back,
and query the shortest route or distance between two node names.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import PlainTextResponse, Response

from ..domain.errors import (
    InvalidGraphError,
    InvalidRequestError,
    MapNotSetError,
    RouteNotFoundError,
)
from ..domain.models import AccessLevel, RouteResult
from ..services import MapService
from .schemas import HealthSchema, NodeSchema
from .security import get_map_service, require_access

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/map", tags=["map"])
health_router = APIRouter(tags=["health"])

INVALID_GRAPH_MESSAGE = "Invalid graph data."
MAP_NOT_SET_MESSAGE = "Map has not been set."
MISSING_PARAMETERS_MESSAGE = "Parameters 'from' and 'to' are required."
ROUTE_NOT_FOUND_MESSAGE = "Unknown node names or no path found."


def _route_between(service: MapService, start: Optional[str], end: Optional[str]) -> RouteResult:
    if not start or not end:
        raise InvalidRequestError(MISSING_PARAMETERS_MESSAGE)

    route = service.shortest_path(start, end)
    if not route.is_found:
        raise RouteNotFoundError(
            ROUTE_NOT_FOUND_MESSAGE,
            start=start,
            end=end,
            reason=route.failure.name if route.failure else "",
        )
    return route


def _endpoints(
    start: Optional[str] = Query(default=None, alias="from"),
    end: Optional[str] = Query(default=None, alias="to"),
) -> Tuple[Optional[str], Optional[str]]:
    return start, end


@router.post(
    "/SetMap",
    dependencies=[Depends(require_access(AccessLevel.READ_WRITE))],
    summary="Replace the stored map",
)
def set_map(
    graph: Optional[List[NodeSchema]] = Body(default=None),
    service: MapService = Depends(get_map_service),
) -> Response:
    if not graph:
        raise InvalidGraphError(INVALID_GRAPH_MESSAGE)

    logger.debug("SetMap request", extra={"nodes": len(graph)})
    service.set_map([node.to_domain() for node in graph])
    return Response(status_code=200)


@router.get(
    "/GetMap",
    response_model=List[NodeSchema],
    dependencies=[Depends(require_access(AccessLevel.READ))],
    summary="Return the stored map",
)
def get_map(service: MapService = Depends(get_map_service)) -> List[NodeSchema]:
    nodes = service.get_map()
    if not nodes:
        raise MapNotSetError(MAP_NOT_SET_MESSAGE)
    return [NodeSchema.from_domain(node) for node in nodes]


@router.get(
    "/ShortestRoute",
    response_class=PlainTextResponse,
    dependencies=[Depends(require_access(AccessLevel.READ))],
    summary="Shortest route as concatenated node names",
)
def shortest_route(
    endpoints: Tuple[Optional[str], Optional[str]] = Depends(_endpoints),
    service: MapService = Depends(get_map_service),
) -> PlainTextResponse:
    route = _route_between(service, *endpoints)
    return PlainTextResponse(route.route_label)


@router.get(
    "/ShortestDistance",
    response_model=int,
    dependencies=[Depends(require_access(AccessLevel.READ))],
    summary="Total distance of the shortest route",
)
def shortest_distance(
    endpoints: Tuple[Optional[str], Optional[str]] = Depends(_endpoints),
    service: MapService = Depends(get_map_service),
) -> int:
    route = _route_between(service, *endpoints)
    return route.distance


@health_router.get("/health", response_model=HealthSchema)
def health(service: MapService = Depends(get_map_service)) -> HealthSchema:
    return HealthSchema(state=service.map_state(), nodes=len(service.get_map()))
