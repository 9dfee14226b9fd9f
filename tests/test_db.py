# tests/test_db.py
"""Tests for the ORM model, repository and database startup checks."""

import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.pool import StaticPool

from envelope.core.errors import ConflictError, StartupError, StorageError
from envelope.db.session import init_database
from envelope.models import Post
from envelope.repositories.post_repo import PostRepository


def _post(share_hash: str, time: int = 10) -> Post:
    return Post(share_hash=share_hash, edit_hash="e" * 64, text="t", time=time, md5="m" * 32)


def test_init_database_creates_post_table() -> None:
    engine = create_engine("sqlite://", poolclass=StaticPool)
    init_database(engine)

    inspector = inspect(engine)
    assert "post" in inspector.get_table_names()
    columns = {c["name"] for c in inspector.get_columns("post")}
    assert columns == {"id", "share_hash", "edit_hash", "text", "time", "md5"}
    engine.dispose()


def test_init_database_unreachable_raises_startup_error() -> None:
    engine = create_engine("sqlite:////nonexistent-directory/envelope.db")
    with pytest.raises(StartupError, match="Error in connecting to DB"):
        init_database(engine)


def test_share_hash_is_unique(db_session) -> None:
    repo = PostRepository(db_session)
    repo.save(_post("aaaaaaaaaaaaaaaa"))

    with pytest.raises(ConflictError):
        repo.save(_post("aaaaaaaaaaaaaaaa"))

    # The session stays usable after the rollback.
    repo.save(_post("bbbbbbbbbbbbbbbb"))
    assert len(repo.list_since(0, 10)) == 2


def test_duplicate_text_is_allowed(db_session) -> None:
    repo = PostRepository(db_session)
    repo.save(_post("aaaaaaaaaaaaaaaa"))
    repo.save(_post("cccccccccccccccc"))
    assert len(repo.list_until(100, 10)) == 2


def test_time_window_bounds_are_inclusive(db_session) -> None:
    repo = PostRepository(db_session)
    for i, t in enumerate((5, 10, 15)):
        repo.save(_post(f"{i:016x}", time=t))

    assert sorted(p.time for p in repo.list_since(10, 10)) == [10, 15]
    assert sorted(p.time for p in repo.list_until(10, 10)) == [5, 10]
    assert len(repo.list_since(0, 2)) == 2


def test_other_integrity_errors_are_storage_errors(db_session) -> None:
    """Only a share_hash collision is reported as a duplicate."""
    repo = PostRepository(db_session)
    broken = Post(share_hash="dddddddddddddddd", edit_hash="e" * 64, text=None, time=1, md5="m" * 32)

    with pytest.raises(StorageError):
        repo.save(broken)

    repo.save(_post("dddddddddddddddd"))
    assert len(repo.list_since(0, 10)) == 1
