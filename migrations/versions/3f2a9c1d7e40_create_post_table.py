"""create post table

Revision ID: 3f2a9c1d7e40
Revises:
Create Date: 2026-10-18 09:12:44.318204

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the post table with a unique share hash."""
    op.create_table(
        "post",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("share_hash", sa.String(length=16), nullable=False),
        sa.Column("edit_hash", sa.String(length=64), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("time", sa.BigInteger(), nullable=False),
        sa.Column("md5", sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("share_hash"),
    )
    op.create_index(op.f("ix_post_time"), "post", ["time"], unique=False)


def downgrade() -> None:
    """Drop the post table."""
    op.drop_index(op.f("ix_post_time"), table_name="post")
    op.drop_table("post")
