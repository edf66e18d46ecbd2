"""Comment projections returned to callers."""

from datetime import datetime

from pydantic import BaseModel

from readproof.domain.model import Comment


class CommentView(BaseModel):
    """Comment as shown to readers.

    Signature material is kept for audit only and never projected.
    """

    comment_id: str
    thread_id: str
    author: str
    author_display_name: str | None
    content: str
    parent_id: str | None
    depth: int
    is_edited: bool
    is_deleted: bool
    upvote_count: int
    downvote_count: int
    score: int
    created_at: datetime
    edited_at: datetime | None
    replies: list["CommentView"] = []

    @classmethod
    def from_comment(
        cls, comment: Comment, replies: list[Comment] | None = None
    ) -> "CommentView":
        return cls(
            comment_id=str(comment.id),
            thread_id=comment.thread_id,
            author=comment.author.root,
            author_display_name=comment.author_display_name,
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            is_edited=comment.is_edited,
            is_deleted=comment.is_deleted,
            upvote_count=comment.upvote_count,
            downvote_count=comment.downvote_count,
            score=comment.score,
            created_at=comment.created_at,
            edited_at=comment.edited_at,
            replies=[cls.from_comment(reply) for reply in replies or []],
        )
