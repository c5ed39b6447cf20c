"""FastAPI application entry point for the greeting service.

This module configures and creates the FastAPI application with
request-ID tracking, security headers, CORS and structured logging.
Process signals are left to the ASGI server: uvicorn stops on SIGTERM
or SIGINT and then runs the shutdown half of ``lifespan``.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import Config, get_config
from middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware
from middleware.security_headers import SecurityHeadersMiddleware
from utils.logging import configure_logging

from .models import API_VERSION
from .routes import NAME_HEADER, router

# ---------------------------------------------------------------------------
# Bootstrap structured logging before anything else
# ---------------------------------------------------------------------------
_settings = get_config()
configure_logging(json_logs=_settings.json_logs, log_level=_settings.log_level)

logger = structlog.get_logger(__name__)

_DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown."""
    logger.info("api_starting", version=app.version, environment=get_config().environment)
    logger.info("api_ready")

    yield

    logger.info("api_shutting_down")
    logger.info("api_shutdown_complete")


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(settings: Config | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Configuration to use. Defaults to ``get_config()``.

    Returns:
        The configured application.
    """
    settings = settings or get_config()

    application = FastAPI(
        title="Greeting API",
        description="Personalized greeting over HTTP",
        version=API_VERSION,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # --- Middleware (added innermost first; the last one added runs first) ---

    # CORS (innermost of ours, so preflight responses still get the headers below)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[*_DEFAULT_ORIGINS, *settings.extra_cors_origins],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", NAME_HEADER, REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )

    if settings.security_headers_enabled:
        application.add_middleware(SecurityHeadersMiddleware)
    else:
        logger.info("security_headers_disabled")

    # Request ID tracking (outermost so every response gets the header)
    application.add_middleware(RequestIDMiddleware)

    application.include_router(router)

    return application


app = create_app()
