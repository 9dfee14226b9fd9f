"""Time-window post fetch endpoint."""

import logging

from fastapi import APIRouter, Response, status

from envelope.api.dependencies import FetchParamsDep, PostRepoDep
from envelope.core.errors import StorageError
from envelope.models.post import Post
from envelope.schemas.post import PostDocument
from envelope.services.post_service import fetch_posts

logger = logging.getLogger(__name__)

router = APIRouter(tags=["fetch"])


@router.post("/fetch", response_model=list[PostDocument])
async def fetch(params: FetchParamsDep, repo: PostRepoDep) -> list[Post] | Response:
    """Return up to ``count`` posts newer (``type=new``) or older (``type=old``) than ``time``.

    Row order is not guaranteed. A storage failure yields an empty 500.
    """
    try:
        return fetch_posts(repo=repo, params=params)
    except StorageError:
        logger.error("Fetch failed for type=%s time=%s", params.type.value, params.time)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
