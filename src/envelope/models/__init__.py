"""SQLAlchemy models for the Envelope application."""

from .post import Post

__all__ = ["Post"]
