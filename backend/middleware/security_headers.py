"""Helmet-style security response headers.

Adds a fixed set of hardening headers to every response. Headers that a
route handler already set are left alone. Content-Security-Policy and
Cross-Origin-Embedder-Policy are intentionally not sent.
"""

from typing import Callable, Mapping

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.get_logger(__name__)

DEFAULT_SECURITY_HEADERS: dict[str, str] = {
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}

_STRIPPED_HEADERS = ("X-Powered-By",)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Apply ``DEFAULT_SECURITY_HEADERS`` (or a custom mapping) to responses."""

    def __init__(self, app, headers: Mapping[str, str] | None = None) -> None:  # noqa: ANN001
        super().__init__(app)
        self._headers = dict(DEFAULT_SECURITY_HEADERS if headers is None else headers)
        logger.info("security_headers_enabled", count=len(self._headers))

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        for name, value in self._headers.items():
            if name not in response.headers:
                response.headers[name] = value

        for name in _STRIPPED_HEADERS:
            if name in response.headers:
                del response.headers[name]

        return response
