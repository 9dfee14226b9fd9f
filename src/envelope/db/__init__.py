"""Database configuration and utilities."""

from .session import build_engine, build_session_factory, get_db

__all__ = ["build_engine", "build_session_factory", "get_db"]
