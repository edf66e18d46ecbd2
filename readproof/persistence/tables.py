"""SQLAlchemy table definitions for readproof.

Tables are used through SQLAlchemy Core; rows are mapped to the frozen domain
models by hand (see mappers). They match the schema defined in Alembic
migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("thread_id", String(255), nullable=False),
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="RESTRICT"),
        nullable=True,
    ),
    Column("author", String(42), nullable=False),  # Lowercase wallet address
    Column("author_display_name", String(255), nullable=True),
    Column("content", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    Column("score", Integer, nullable=False, server_default="0"),
    Column("signature", String(132), nullable=False),
    Column("message_hash", String(66), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("depth IN (0, 1)", name="depth_two_levels"),
    CheckConstraint(
        "(parent_id IS NULL AND depth = 0) OR (parent_id IS NOT NULL AND depth = 1)",
        name="depth_matches_parent",
    ),
    CheckConstraint("upvote_count >= 0", name="upvote_count_non_negative"),
    CheckConstraint("downvote_count >= 0", name="downvote_count_non_negative"),
    CheckConstraint("char_length(content) <= 2000", name="content_max_length"),
)

Index(
    "idx_comments_thread_score",
    comments_table.c.thread_id,
    comments_table.c.score.desc(),
    comments_table.c.created_at.desc(),
)
Index(
    "idx_comments_thread_created_at",
    comments_table.c.thread_id,
    comments_table.c.created_at.desc(),
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author", comments_table.c.author)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "comment_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("voter", String(42), nullable=False),
    Column("vote_type", String(10), nullable=False),  # 'upvote', 'downvote'
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "voter", name="unique_vote"),
    CheckConstraint("vote_type IN ('upvote', 'downvote')", name="vote_type_valid"),
)

Index("idx_votes_voter", votes_table.c.voter)

# ============================================================================
# READ RECEIPTS TABLE
# ============================================================================
read_receipts_table = Table(
    "read_receipts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("thread_id", String(255), nullable=False),
    Column("reader", String(42), nullable=False),
    Column("display_name", String(255), nullable=True),
    Column("signature", String(132), nullable=False),
    Column("message_hash", String(66), nullable=False),
    Column(
        "signed_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("reader", "thread_id", name="unique_read_receipt"),
)

Index(
    "idx_read_receipts_thread_signed_at",
    read_receipts_table.c.thread_id,
    read_receipts_table.c.signed_at.desc(),
)
