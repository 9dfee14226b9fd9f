"""SQLAlchemy model for shared text posts."""

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from envelope.db.session import Base

SHARE_HASH_BYTES = 8
EDIT_HASH_BYTES = 32


class Post(Base):
    """An anonymously submitted text post.

    Posts are immutable once inserted: nothing in the application updates or
    deletes a row.
    """

    __tablename__ = "post"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Public identifier placed in share links; uniqueness is enforced by the store.
    share_hash: Mapped[str] = mapped_column(
        String(SHARE_HASH_BYTES * 2), nullable=False, unique=True
    )
    # Secret handed only to the original poster, reserved for edit authorization.
    edit_hash: Mapped[str] = mapped_column(String(EDIT_HASH_BYTES * 2), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    # Unix seconds at submission.
    time: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    # Diagnostics only; duplicates of the same text are allowed.
    md5: Mapped[str] = mapped_column(String(32), nullable=False)
