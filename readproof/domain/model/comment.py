"""Comment entity.

Comments are threaded discussions on an article, exactly two levels deep:
top-level comments (depth 0) and replies to them (depth 1).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from readproof.domain.model.common import DomainModel
from readproof.domain.value import CommentId, Identity, ThreadId

DELETED_CONTENT = "[deleted]"
MAX_CONTENT_LENGTH = 2000
# Raw input may carry markup; MAX_CONTENT_LENGTH applies after stripping it
MAX_RAW_CONTENT_LENGTH = 10_000


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment on a thread or a reply to one.

    Business rules:
    - depth is 0 without a parent and 1 with one (replies to replies are rejected)
    - is_edited and is_deleted only ever go from False to True
    - upvote_count/downvote_count are only changed by the vote counter update
    - score is always upvote_count - downvote_count
    - signature and message_hash are kept for audit and never projected
    """

    id: CommentId
    thread_id: ThreadId
    author: Identity
    author_display_name: Optional[str] = None
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0, le=1)
    is_edited: bool = False
    is_deleted: bool = False
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
    score: int = 0
    signature: str
    message_hash: str
    created_at: datetime = Field(default_factory=datetime.now)
    edited_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_threading(self) -> "Comment":
        """Depth must follow from the presence of a parent."""
        expected = 0 if self.parent_id is None else 1
        if self.depth != expected:
            raise ValueError(
                f"Comment depth {self.depth} inconsistent with parent_id {self.parent_id}"
            )
        return self

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None
