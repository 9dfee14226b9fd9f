"""Top-level router wiring.

Composes the sub-routers; holds no endpoint definitions of its own. Routes are
mounted at the root so the public paths stay ``/submit/post``,
``/submit-post``, ``/submit/photo`` and ``/fetch``.
"""
from __future__ import annotations

from fastapi import APIRouter
from slowapi import Limiter

from envelope.core.settings import Settings

from . import routes_fetch, routes_submit, routes_system


def build_api_router(limiter: Limiter, settings: Settings) -> APIRouter:
    """Return the full API surface, rate limited by ``limiter``."""
    api_router = APIRouter()
    api_router.include_router(routes_system.router)
    api_router.include_router(routes_submit.build_router(limiter, settings.submit_rate_limit))
    api_router.include_router(routes_fetch.router)
    return api_router


__all__ = ["build_api_router"]
