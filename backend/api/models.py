"""Pydantic models for the greeting API responses.

Greeting endpoints return plain text; only the health check uses a
structured body.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

API_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Response for health check endpoint.

    Attributes:
        status: Service status.
        version: API version.
        timestamp: Current server time.
    """

    status: str = Field(
        default="ok",
        description="Service status"
    )
    version: str = Field(
        default=API_VERSION,
        description="API version"
    )
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
        description="Current server time"
    )
