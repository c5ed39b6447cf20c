"""Per-request correlation ID and access logging.

Greeting requests carry the caller's name in the URL, so access logs name
the matched route template (``/hello/{name:path}``) rather than the raw
path. The correlation ID is taken from ``X-Request-ID`` when a proxy
supplies one and echoed back on the response.
"""

import time
import uuid
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
UNMATCHED_ROUTE = "<unmatched>"

logger = structlog.get_logger(__name__)


def _route_template(request: Request) -> str:
    """Return the path template of the route that served *request*."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ROUTE


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Bind a request ID to the structlog context and time each request.

    ``request.state.request_id`` holds the ID for route handlers.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id, method=request.method)
        request.state.request_id = request_id

        logger.info(
            "request_started",
            client=request.client.host if request.client else "unknown",
        )
        started = time.perf_counter()

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id

        logger.info(
            "request_finished",
            route=_route_template(request),
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )

        return response
