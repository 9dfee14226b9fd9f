"""Business services for the Envelope application."""

from .post_service import create_post, fetch_posts

__all__ = ["create_post", "fetch_posts"]
