"""Service-level helpers for creating and fetching posts."""
from __future__ import annotations

import logging

from envelope.core.errors import ConflictError
from envelope.db.time import unix_now
from envelope.models.post import EDIT_HASH_BYTES, SHARE_HASH_BYTES, Post
from envelope.repositories.post_repo import PostRepository
from envelope.schemas.post import FetchParams, FetchType
from envelope.utils.hash import md5_hexdigest, random_hex

logger = logging.getLogger(__name__)


def generate_share_hash() -> str:
    """Return a new public share identifier (8 random bytes, hex)."""
    return random_hex(SHARE_HASH_BYTES)


def generate_edit_hash() -> str:
    """Return a new secret edit identifier (32 random bytes, hex)."""
    return random_hex(EDIT_HASH_BYTES)


def create_post(*, repo: PostRepository, text: str) -> Post:
    """Build and persist a post for the submitted text.

    Args:
        repo: Repository used to persist the post.
        text: Submitted content, already validated as non-empty.

    Returns:
        The persisted post.

    Raises:
        ConflictError: If the generated share hash already exists.
        StorageError: If the insert fails for any other reason.
    """
    post = Post(
        share_hash=generate_share_hash(),
        edit_hash=generate_edit_hash(),
        text=text,
        time=unix_now(),
        md5=md5_hexdigest(text),
    )
    try:
        repo.save(post)
    except ConflictError:
        logger.warning("duplicate post. md5: %s, share_hash: %s", post.md5, post.share_hash)
        raise
    logger.info("Saved post %s", post.share_hash)
    return post


def fetch_posts(*, repo: PostRepository, params: FetchParams) -> list[Post]:
    """Return posts on the requested side of ``params.time``."""
    if params.type is FetchType.NEW:
        return repo.list_since(params.time, params.count)
    return repo.list_until(params.time, params.count)
