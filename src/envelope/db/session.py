"""Database engine, session factory and startup checks.

The engine and session factory are built per application from its settings
and kept on ``app.state``; requests reach them through :func:`get_db`.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from envelope.core.errors import StartupError
from envelope.core.settings import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Ensure model modules are imported so that metadata is populated when create_all runs.
import envelope.models  # noqa: E402,F401


def build_engine(settings: Settings) -> Engine:
    """Return the pooled engine shared by every request of one application."""
    return create_engine(
        settings.database_url,
        pool_pre_ping=True,
        echo=settings.sql_debug,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return a session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a database session from the application's session factory."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind: Engine) -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=bind)


def init_database(bind: Engine) -> None:
    """Verify the database is reachable and make sure the schema exists.

    Raises:
        StartupError: If the connection or schema creation fails.
    """
    try:
        with bind.connect() as connection:
            connection.execute(text("SELECT 1"))
        create_tables(bind)
    except SQLAlchemyError as exc:
        raise StartupError(f"Error in connecting to DB: {exc}") from exc
    logger.info("Connected to database %s", bind.url.render_as_string(hide_password=True))
