# tests/test_migrations.py
"""The Alembic history builds the same schema the application expects."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture()
def migrated_url(tmp_path) -> str:
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    config = Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.set_main_option("sqlalchemy.url", url)
    command.upgrade(config, "head")
    return url


def test_upgrade_head_creates_post_table(migrated_url) -> None:
    engine = create_engine(migrated_url)
    try:
        inspector = inspect(engine)
        assert "post" in inspector.get_table_names()
        columns = {c["name"] for c in inspector.get_columns("post")}
        assert columns == {"id", "share_hash", "edit_hash", "text", "time", "md5"}
        assert ["time"] in [ix["column_names"] for ix in inspector.get_indexes("post")]
    finally:
        engine.dispose()


def test_upgrade_head_enforces_unique_share_hash(migrated_url) -> None:
    engine = create_engine(migrated_url)
    insert = text(
        "INSERT INTO post (share_hash, edit_hash, text, time, md5) "
        "VALUES ('0123456789abcdef', :edit, 'hi', 1, :md5)"
    )
    try:
        with engine.begin() as conn:
            conn.execute(insert, {"edit": "e" * 64, "md5": "m" * 32})
        with pytest.raises(IntegrityError):
            with engine.begin() as conn:
                conn.execute(insert, {"edit": "f" * 64, "md5": "m" * 32})
    finally:
        engine.dispose()
