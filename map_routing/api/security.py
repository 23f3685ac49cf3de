"""API key checks.

Every map endpoint declares the access level it needs through
``require_access``. The check runs before the endpoint body, so the
map service is never reached with a missing or insufficient key.
"""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import Depends, Request

from ..container import Container
from ..domain.errors import AuthenticationError, PermissionDeniedError
from ..domain.models import AccessLevel
from ..ports.auth import ApiKeyResolverPort
from ..services import MapService

logger = logging.getLogger(__name__)


def get_request_container(request: Request) -> Container:
    return request.app.state.container


def get_map_service(container: Container = Depends(get_request_container)) -> MapService:
    return container.resolve(MapService)


def require_access(required: AccessLevel) -> Callable[..., AccessLevel]:
    """Build a dependency that enforces ``required`` on the request's API key.

    Args:
        required: Minimum access level for the endpoint.

    Returns:
        A FastAPI dependency returning the granted level.
    """

    def check_api_key(
        request: Request,
        container: Container = Depends(get_request_container),
    ) -> AccessLevel:
        header_name = container.config.auth.header_name
        api_key = request.headers.get(header_name)
        if not api_key:
            logger.warning("Rejected request without API key", extra={"path": request.url.path})
            raise AuthenticationError("API Key missing")

        resolver: ApiKeyResolverPort = container.resolve(ApiKeyResolverPort)
        granted = resolver.resolve(api_key)
        if granted is None:
            logger.warning("Rejected unknown API key", extra={"path": request.url.path})
            raise AuthenticationError("Invalid API Key")

        if not granted.grants(required):
            logger.warning(
                "Rejected API key with insufficient access",
                extra={
                    "path": request.url.path,
                    "required": required.value,
                    "granted": granted.value,
                },
            )
            raise PermissionDeniedError(
                "Insufficient permissions",
                required=required.value,
                granted=granted.value,
            )

        return granted

    return check_api_key
