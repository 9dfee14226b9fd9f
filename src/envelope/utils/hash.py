"""Identifier and digest helpers for posts."""

from __future__ import annotations

import hashlib
import secrets


def random_hex(nbytes: int) -> str:
    """Return ``nbytes`` of cryptographically secure randomness, hex-encoded."""
    return secrets.token_hex(nbytes)


def md5_hexdigest(text: str) -> str:
    """Return the hex MD5 digest of UTF-8 encoded text.

    Used as a diagnostic fingerprint only, never for security decisions.
    """
    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()
