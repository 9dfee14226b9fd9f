"""Post submission endpoints."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from slowapi import Limiter

from envelope.api.dependencies import PostRepoDep, SubmittedText
from envelope.core.rate_limit import SUBMIT_LIMIT_SCOPE
from envelope.schemas.post import SubmitPostResponse
from envelope.services.post_service import create_post


def build_router(limiter: Limiter, submit_limit: str) -> APIRouter:
    """Return the submission routes guarded by ``limiter`` at ``submit_limit``."""
    router = APIRouter(tags=["submit"])
    limit_submissions = limiter.shared_limit(submit_limit, scope=SUBMIT_LIMIT_SCOPE)

    @router.post("/submit/post", response_model=SubmitPostResponse)
    @router.post("/submit-post", response_model=SubmitPostResponse)
    @limit_submissions
    async def submit_post(
        request: Request,
        text: SubmittedText,
        repo: PostRepoDep,
    ) -> SubmitPostResponse:
        """Store a new post and hand back its share and edit identifiers.

        Args:
            request: Incoming request, used to key the rate limit.
            text: Validated post content.
            repo: Post repository bound to this request's session.

        Returns:
            The public ``share_hash``, the secret ``edit_hash`` and the stored time.

        Raises:
            ConflictError: On a ``share_hash`` collision (rendered as 400).
            StorageError: On any other database failure (rendered as 500).
        """
        post = create_post(repo=repo, text=text)
        return SubmitPostResponse(
            share_hash=post.share_hash,
            edit_hash=post.edit_hash,
            time=post.time,
        )

    @router.post("/submit/photo", response_class=PlainTextResponse)
    @limit_submissions
    async def submit_photo(request: Request) -> str:
        """Placeholder for photo uploads."""
        return "photo upload"

    return router
