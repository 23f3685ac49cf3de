"""FastAPI application factory and server entry point."""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Type

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from ..config import get_config
from ..container import Container, get_container
from ..domain.errors import (
    AuthenticationError,
    ConfigurationError,
    InvalidRequestError,
    MapNotSetError,
    MapRoutingError,
    PermissionDeniedError,
    RouteNotFoundError,
)
from ..monitoring import configure_logging
from .routes import INVALID_GRAPH_MESSAGE, health_router, router

logger = logging.getLogger(__name__)

# First match wins, so subclasses must come before their bases.
_STATUS_BY_ERROR: Tuple[Tuple[Type[MapRoutingError], int], ...] = (
    (AuthenticationError, 401),
    (PermissionDeniedError, 401),
    (InvalidRequestError, 400),
    (MapNotSetError, 400),
    (RouteNotFoundError, 400),
    (ConfigurationError, 500),
)


def status_for(error: MapRoutingError) -> int:
    """Return the HTTP status code for a domain error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return 500


async def _handle_domain_error(request: Request, exc: MapRoutingError) -> PlainTextResponse:
    status_code = status_for(exc)
    log = logger.error if status_code >= 500 else logger.info
    log(
        "Request failed",
        extra={
            "path": request.url.path,
            "status": status_code,
            "error": type(exc).__name__,
            "detail": str(exc),
        },
    )
    return PlainTextResponse(exc.message, status_code=status_code)


async def _handle_validation_error(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    logger.info(
        "Malformed request",
        extra={"path": request.url.path, "errors": len(exc.errors())},
    )
    return PlainTextResponse(INVALID_GRAPH_MESSAGE, status_code=400)


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build the API application.

    Args:
        container: Dependency container; the process-wide default if omitted.

    Returns:
        A FastAPI application with the map and health routes.
    """
    app = FastAPI(title="Map Routing API")
    app.state.container = container or get_container()

    app.add_exception_handler(MapRoutingError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)

    app.include_router(router)
    app.include_router(health_router)
    return app


def main() -> None:
    """Run the API server with uvicorn using the configured host and port."""
    config = get_config()
    configure_logging(config.observability)

    logger.info(
        "Starting server",
        extra={"host": config.server.host, "port": config.server.port},
    )
    uvicorn.run(
        "map_routing.api.app:create_app",
        factory=True,
        host=config.server.host,
        port=config.server.port,
        reload=config.server.reload,
        log_config=None,
    )
