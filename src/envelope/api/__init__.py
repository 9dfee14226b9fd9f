"""HTTP API surface."""

from .router import build_api_router

__all__ = ["build_api_router"]
