"""Common schemas shared across endpoints."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """JSON error body returned to clients that accept JSON."""

    error: str
    code: int


class HealthResponse(BaseModel):
    """Liveness payload."""

    status: str
