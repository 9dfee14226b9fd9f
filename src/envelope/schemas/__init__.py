"""Pydantic schemas for request and response bodies."""

from .common import ErrorResponse, HealthResponse
from .post import FetchParams, FetchType, PostDocument, SubmitPostResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "FetchParams",
    "FetchType",
    "PostDocument",
    "SubmitPostResponse",
]
