"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from readproof.domain.model import Comment, ReadReceipt, Vote
from readproof.domain.value import (
    CommentId,
    Identity,
    ReadReceiptId,
    ThreadId,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        thread_id=ThreadId(row["thread_id"]),
        author=Identity(row["author"]),
        author_display_name=row.get("author_display_name"),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        depth=row["depth"],
        is_edited=row["is_edited"],
        is_deleted=row["is_deleted"],
        upvote_count=row["upvote_count"],
        downvote_count=row["downvote_count"],
        score=row["score"],
        signature=row["signature"],
        message_hash=row["message_hash"],
        created_at=row["created_at"],
        edited_at=row.get("edited_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        voter=Identity(row["voter"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["vote_type"] = vote.vote_type.value
    return data


def row_to_read_receipt(row: Dict[str, Any]) -> ReadReceipt:
    """Convert database row to ReadReceipt domain model."""
    return ReadReceipt(
        id=ReadReceiptId(_uuid(row["id"])),
        thread_id=ThreadId(row["thread_id"]),
        reader=Identity(row["reader"]),
        display_name=row.get("display_name"),
        signature=row["signature"],
        message_hash=row["message_hash"],
        signed_at=row["signed_at"],
    )


def read_receipt_to_dict(receipt: ReadReceipt) -> Dict[str, Any]:
    """Convert ReadReceipt domain model to database dict."""
    return receipt.model_dump()
