"""
Gateway request logging.

Every request gets a request id (taken from ``x-request-id`` or generated),
bound into the structlog context so provider and resolver logs emitted while
serving it carry the same id. One ``api_request`` line is written per request.

Routes are logged by their template (``/api/wallet/{address}/balances``) with
the path parameters as separate fields, so lines for the same operation group
together. Health probes are logged at debug level.
"""

import time
import uuid
from typing import Any, Dict, Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Match

logger = structlog.stdlib.get_logger("monorail_gateway.http")

REQUEST_ID_HEADER = "x-request-id"
QUIET_PATHS = frozenset({"/healthz"})


def new_request_id() -> str:
    return uuid.uuid4().hex[:12]


def _match_route(request: Request) -> Optional[Dict[str, Any]]:
    """Find the route template and path params for a request, if any route matches."""
    for route in request.app.routes:
        match, child_scope = route.matches(request.scope)
        if match == Match.FULL:
            return {
                "route": getattr(route, "path", request.url.path),
                "operation": getattr(route, "name", None),
                "path_params": child_scope.get("path_params") or None,
            }
    return None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Bind a request id and log one summary line per gateway request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id, surface="http")

        start = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            fields: Dict[str, Any] = {
                "method": request.method,
                "status": status_code,
                "duration_ms": round((time.perf_counter() - start) * 1000, 1),
            }
            fields.update(_match_route(request) or {"route": None, "path": request.url.path})
            if request.url.query:
                fields["query"] = request.url.query

            if status_code >= 500:
                logger.error("api_request", **fields)
            elif status_code >= 400:
                logger.warning("api_request", **fields)
            elif request.url.path in QUIET_PATHS:
                logger.debug("api_request", **fields)
            else:
                logger.info("api_request", **fields)
