"""initial_schema

Create the schema for readproof:
- Comments (two levels: top-level and replies, soft/hard delete, vote counters)
- Votes (one up/down vote per wallet per comment)
- Read receipts (one signed attestation per wallet per thread)

Revision ID: 3f1c9a7e52d4
Revises:
Create Date: 2026-10-19 10:12:41.508113

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7e52d4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "comments",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("thread_id", sa.String(255), nullable=False),
        sa.Column(
            "parent_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("comments.id", ondelete="RESTRICT"),
            nullable=True,
        ),
        sa.Column("author", sa.String(42), nullable=False),
        sa.Column("author_display_name", sa.String(255), nullable=True),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("depth", sa.Integer, nullable=False, server_default="0"),
        sa.Column("is_edited", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("is_deleted", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("upvote_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("downvote_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("score", sa.Integer, nullable=False, server_default="0"),
        sa.Column("signature", sa.String(132), nullable=False),
        sa.Column("message_hash", sa.String(66), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("edited_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.CheckConstraint("depth IN (0, 1)", name="depth_two_levels"),
        sa.CheckConstraint(
            "(parent_id IS NULL AND depth = 0) OR (parent_id IS NOT NULL AND depth = 1)",
            name="depth_matches_parent",
        ),
        sa.CheckConstraint("upvote_count >= 0", name="upvote_count_non_negative"),
        sa.CheckConstraint("downvote_count >= 0", name="downvote_count_non_negative"),
        sa.CheckConstraint("char_length(content) <= 2000", name="content_max_length"),
    )
    op.create_index(
        "idx_comments_thread_score",
        "comments",
        ["thread_id", sa.text("score DESC"), sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_comments_thread_created_at",
        "comments",
        ["thread_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_author", "comments", ["author"])

    op.create_table(
        "votes",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "comment_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("comments.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("voter", sa.String(42), nullable=False),
        sa.Column("vote_type", sa.String(10), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        # Enforces one vote per wallet per comment under concurrent casts
        sa.UniqueConstraint("comment_id", "voter", name="unique_vote"),
        sa.CheckConstraint(
            "vote_type IN ('upvote', 'downvote')", name="vote_type_valid"
        ),
    )
    op.create_index("idx_votes_voter", "votes", ["voter"])

    op.create_table(
        "read_receipts",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("thread_id", sa.String(255), nullable=False),
        sa.Column("reader", sa.String(42), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("signature", sa.String(132), nullable=False),
        sa.Column("message_hash", sa.String(66), nullable=False),
        sa.Column(
            "signed_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.UniqueConstraint("reader", "thread_id", name="unique_read_receipt"),
    )
    op.create_index(
        "idx_read_receipts_thread_signed_at",
        "read_receipts",
        ["thread_id", sa.text("signed_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_read_receipts_thread_signed_at", table_name="read_receipts")
    op.drop_table("read_receipts")

    op.drop_index("idx_votes_voter", table_name="votes")
    op.drop_table("votes")

    op.drop_index("idx_comments_author", table_name="comments")
    op.drop_index("idx_comments_parent_id", table_name="comments")
    op.drop_index("idx_comments_thread_created_at", table_name="comments")
    op.drop_index("idx_comments_thread_score", table_name="comments")
    op.drop_table("comments")
