# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "true")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from envelope.db.session import Base
from envelope.db.session import get_db as app_get_session
from envelope.main import app as fastapi_app
from envelope.models import Post
from envelope.utils.hash import md5_hexdigest, random_hex

TEST_DB_URL = "sqlite://"


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture(autouse=True)
def reset_rate_limits(app: FastAPI) -> Iterator[None]:
    """Give every test a fresh rate-limit window."""
    app.state.limiter.reset()
    yield
    app.state.limiter.reset()


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    """Return a factory that inserts a post stamped with the given time."""

    def _make_post(text: str = "hello envelope", time: int = 1_700_000_000) -> Post:
        post = Post(
            share_hash=random_hex(8),
            edit_hash=random_hex(32),
            text=text,
            time=time,
            md5=md5_hexdigest(text),
        )
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post

    return _make_post
