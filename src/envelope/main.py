"""Main entry point for the Envelope application."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from envelope.api import build_api_router
from envelope.api.errors import register_exception_handlers
from envelope.core.errors import StartupError
from envelope.core.logging_config import configure_logging
from envelope.core.rate_limit import build_limiter
from envelope.core.settings import Settings, get_settings
from envelope.db.session import build_engine, build_session_factory, create_tables, init_database
from envelope.middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application from explicit startup settings.

    Everything configurable hangs off the returned app: ``app.state.settings``,
    the pooled ``engine`` and its ``session_factory``, and the ``limiter``.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Anonymous text-sharing API",
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.settings = settings

    # One pooled engine reused by every request
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    # Rate limiting
    limiter = build_limiter(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    app.add_middleware(RequestLoggingMiddleware)
    # Add GZip middleware for compression
    app.add_middleware(GZipMiddleware)

    app.include_router(build_api_router(limiter, settings))

    @app.on_event("startup")
    async def on_startup() -> None:
        create_tables(app.state.engine)

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        app.state.engine.dispose()

    return app


app = create_app()


def main() -> None:
    """Check the database, then serve until interrupted.

    Exits with status 1 if the database cannot be reached. uvicorn exits with
    a failure status on its own if the port cannot be bound.
    """
    settings = get_settings()
    application = create_app(settings)

    try:
        init_database(application.state.engine)
    except StartupError as exc:
        logger.critical("%s", exc)
        raise SystemExit(1) from exc

    logger.info("Server starting on http://%s:%d", settings.host, settings.port)
    uvicorn.run(
        application,
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
        forwarded_allow_ips=settings.forwarded_allow_ips,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
