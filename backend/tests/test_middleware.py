"""Tests for the request ID and security header middleware."""

import sys
from pathlib import Path

import pytest
from starlette.applications import Starlette
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

# Add backend directory to path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware  # noqa: E402
from middleware.security_headers import (  # noqa: E402
    DEFAULT_SECURITY_HEADERS,
    SecurityHeadersMiddleware,
)


# ---------------------------------------------------------------------------
# Request ID middleware tests
# ---------------------------------------------------------------------------


class TestRequestIDMiddleware:
    """Tests for RequestIDMiddleware behavior via headers."""

    def _make_client(self) -> TestClient:
        async def homepage(request):
            return JSONResponse({"request_id": request.state.request_id})

        app = Starlette(routes=[Route("/", homepage)])
        app.add_middleware(RequestIDMiddleware)
        return TestClient(app)

    def test_generates_request_id(self):
        """Middleware generates a UUID if none provided."""
        response = self._make_client().get("/")

        assert response.status_code == 200
        assert REQUEST_ID_HEADER in response.headers
        assert len(response.headers[REQUEST_ID_HEADER]) == 36
        assert response.json()["request_id"] == response.headers[REQUEST_ID_HEADER]

    def test_preserves_incoming_request_id(self):
        """Middleware uses the client-provided X-Request-ID."""
        response = self._make_client().get("/", headers={REQUEST_ID_HEADER: "my-custom-id"})

        assert response.headers[REQUEST_ID_HEADER] == "my-custom-id"
        assert response.json()["request_id"] == "my-custom-id"

    def test_empty_incoming_id_is_replaced(self):
        response = self._make_client().get("/", headers={REQUEST_ID_HEADER: ""})

        assert len(response.headers[REQUEST_ID_HEADER]) == 36

    def test_ids_differ_between_requests(self):
        client = self._make_client()
        first = client.get("/").headers[REQUEST_ID_HEADER]
        second = client.get("/").headers[REQUEST_ID_HEADER]

        assert first != second


# ---------------------------------------------------------------------------
# Security headers middleware tests
# ---------------------------------------------------------------------------


class TestSecurityHeadersMiddleware:
    """Tests for SecurityHeadersMiddleware."""

    def _make_app(self, headers=None):
        async def homepage(request):
            return PlainTextResponse("ok")

        async def framed(request):
            return PlainTextResponse("ok", headers={"X-Frame-Options": "DENY"})

        async def powered(request):
            return PlainTextResponse("ok", headers={"X-Powered-By": "Starlette"})

        app = Starlette(routes=[
            Route("/", homepage),
            Route("/framed", framed),
            Route("/powered", powered),
        ])
        app.add_middleware(SecurityHeadersMiddleware, headers=headers)
        return app

    def test_default_headers_added(self):
        client = TestClient(self._make_app())
        response = client.get("/")

        assert response.status_code == 200
        for name, value in DEFAULT_SECURITY_HEADERS.items():
            assert response.headers[name] == value

    def test_handler_headers_not_overridden(self):
        client = TestClient(self._make_app())
        response = client.get("/framed")

        assert response.headers["X-Frame-Options"] == "DENY"

    def test_powered_by_stripped(self):
        client = TestClient(self._make_app())
        response = client.get("/powered")

        assert "X-Powered-By" not in response.headers

    def test_custom_headers(self):
        client = TestClient(self._make_app(headers={"X-Custom": "1"}))
        response = client.get("/")

        assert response.headers["X-Custom"] == "1"
        assert "X-Frame-Options" not in response.headers

    def test_headers_on_not_found(self):
        client = TestClient(self._make_app())
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    @pytest.mark.parametrize("name", ["Content-Security-Policy", "Cross-Origin-Embedder-Policy"])
    def test_disabled_policies_not_in_defaults(self, name):
        assert name not in DEFAULT_SECURITY_HEADERS
