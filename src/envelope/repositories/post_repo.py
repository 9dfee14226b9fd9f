"""Data access helpers for working with posts."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from envelope.core.errors import ConflictError, StorageError
from envelope.models.post import Post

__all__ = ["PostRepository"]

logger = logging.getLogger(__name__)


def _is_share_hash_violation(exc: IntegrityError) -> bool:
    # SQLite names the column, PostgreSQL and MySQL the key (post_share_hash_key).
    message = str(exc.orig).lower()
    return "share_hash" in message and ("unique" in message or "duplicate" in message)


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def save(self, post: Post) -> Post:
        """Insert a post and commit.

        Raises:
            ConflictError: If ``share_hash`` collides with an existing row.
            StorageError: On any other database failure.
        """
        self.session.add(post)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            if _is_share_hash_violation(exc):
                raise ConflictError() from exc
            logger.error("Integrity error in storing post: %s", exc)
            raise StorageError() from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Error occurred in storing post: %s", exc)
            raise StorageError() from exc
        return post

    def list_since(self, since: float, limit: int) -> list[Post]:
        """Return up to ``limit`` posts with ``time >= since``."""
        return self._list(Post.time >= since, limit)

    def list_until(self, until: float, limit: int) -> list[Post]:
        """Return up to ``limit`` posts with ``time <= until``."""
        return self._list(Post.time <= until, limit)

    def _list(self, condition, limit: int) -> list[Post]:
        # No ORDER BY: row order is whatever the store returns.
        stmt = select(Post).where(condition).limit(limit)
        try:
            return list(self.session.scalars(stmt))
        except SQLAlchemyError as exc:
            logger.error("error in fetching posts. %s", exc)
            raise StorageError() from exc
