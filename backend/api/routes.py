"""API routes for the greeting service.

Two endpoints feed the greeting normalizer:

- ``GET /hello`` and ``GET /hello/{name}`` take the name from the path.
- ``POST /hello`` takes the name from the ``x-name`` request header.

A trailing slash is accepted on every greeting route.

Both always answer 200 with the greeting as a plain-text body.
"""

from typing import Optional
from urllib.parse import unquote_to_bytes

import structlog
from fastapi import APIRouter, Header, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from api.models import HealthResponse
from greeting import BASE_GREETING, get_greeting

logger = structlog.get_logger(__name__)

router = APIRouter()

NAME_HEADER = "x-name"
HELLO_PREFIX = "/hello/"


def _path_segment(request: Request, decoded: str) -> str:
    """Return the single path segment after ``/hello/``, percent-decoded.

    The router matches on the decoded path, where ``%2F`` has already
    become ``/``. Segment boundaries are therefore taken from the raw
    path. One trailing slash is allowed.
    """
    raw_path: Optional[bytes] = request.scope.get("raw_path")
    if not raw_path:
        raw = decoded
    else:
        raw = raw_path.split(b"?", 1)[0].decode("latin-1").partition(HELLO_PREFIX)[2]

    if raw.endswith("/"):
        raw = raw[:-1]
    if "/" in raw:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    return unquote_to_bytes(raw).decode("utf-8", errors="replace") if raw_path else raw


def _greet(name: Optional[str], source: str) -> PlainTextResponse:
    """Build the greeting response and log where the name came from."""
    message = get_greeting(name)
    logger.debug(
        "greeting_served",
        source=source if name is not None else "none",
        name_present=message != BASE_GREETING,
    )
    return PlainTextResponse(message)


# ---------------------------------------------------------------------------
# Greeting Endpoints
# ---------------------------------------------------------------------------


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Default greeting",
    tags=["greeting"],
)
async def root() -> PlainTextResponse:
    """Return the unpersonalized greeting."""
    return _greet(None, "none")


@router.get(
    "/hello",
    response_class=PlainTextResponse,
    summary="Greeting without a name",
    tags=["greeting"],
)
@router.get(
    "/hello/",
    response_class=PlainTextResponse,
    include_in_schema=False,
)
async def hello() -> PlainTextResponse:
    """``GET /hello`` and ``GET /hello/`` return ``"Hello world!"``."""
    return _greet(None, "path")


@router.get(
    "/hello/{name:path}",
    response_class=PlainTextResponse,
    summary="Greeting from the URL path",
    tags=["greeting"],
)
async def hello_from_path(request: Request, name: str) -> PlainTextResponse:
    """Generate a greeting with a name from the URL path.

    ``GET /hello/Alice`` returns ``"Hello world! From Alice"``. The name is
    a single percent-decoded segment, so ``/hello/..%2Fetc`` greets
    ``"../etc"`` while ``/hello/a/b`` is not found.

    Args:
        request: Incoming request, used for its undecoded path.
        name: Path remainder as decoded by the router.

    Returns:
        Plain-text greeting.

    Raises:
        HTTPException: 404 when the raw path holds more than one segment.
    """
    return _greet(_path_segment(request, name), "path")


@router.post(
    "/hello",
    response_class=PlainTextResponse,
    summary="Greeting from the x-name header",
    tags=["greeting"],
)
@router.post(
    "/hello/",
    response_class=PlainTextResponse,
    include_in_schema=False,
)
async def hello_from_header(
    x_name: Optional[str] = Header(default=None, alias=NAME_HEADER),
) -> PlainTextResponse:
    """Generate a greeting with a name from the ``x-name`` request header.

    A missing header and an empty header value both produce the plain
    greeting.

    Args:
        x_name: Header value, or ``None`` when the header is absent.

    Returns:
        Plain-text greeting.
    """
    return _greet(x_name, "header")


# ---------------------------------------------------------------------------
# Health Check
# ---------------------------------------------------------------------------


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    tags=["meta"],
)
async def health_check() -> HealthResponse:
    """Report that the service is up."""
    return HealthResponse()
