"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from readproof.domain.model.comment import DELETED_CONTENT, Comment
from readproof.domain.repository.comment import CommentRepository
from readproof.domain.value import CommentId, CommentSort, ThreadId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Row locks are a no-op: tests drive one request at a time.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(
        self,
        thread_id: ThreadId,
        sort: CommentSort,
        limit: int,
        offset: int = 0,
    ) -> list[Comment]:
        """Find a page of top-level comments for a thread."""
        comments = [
            c
            for c in self._comments.values()
            if c.thread_id == thread_id and c.parent_id is None
        ]

        if sort is CommentSort.SCORE:
            comments.sort(key=lambda c: (c.score, c.created_at), reverse=True)
        else:
            comments.sort(key=lambda c: c.created_at, reverse=True)

        # Paginate
        return comments[offset : offset + limit]

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find replies of several parents, oldest first."""
        wanted = set(parent_ids)
        replies = [c for c in self._comments.values() if c.parent_id in wanted]
        replies.sort(key=lambda c: c.created_at)
        return replies

    async def has_replies(self, comment_id: CommentId) -> bool:
        """Check whether any comment references this one as parent."""
        return any(c.parent_id == comment_id for c in self._comments.values())

    async def count_by_thread(self, thread_id: ThreadId) -> int:
        """Count all comments for a thread."""
        return sum(1 for c in self._comments.values() if c.thread_id == thread_id)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace content of a live comment and mark it edited."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None

        updated = comment.evolve(content=content, is_edited=True, edited_at=edited_at)
        self._comments[comment_id] = updated
        return updated

    async def mark_deleted(self, comment_id: CommentId) -> Optional[Comment]:
        """Soft delete a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        updated = comment.evolve(content=DELETED_CONTENT, is_deleted=True)
        self._comments[comment_id] = updated
        return updated

    async def adjust_vote_counts(
        self, comment_id: CommentId, upvote_delta: int, downvote_delta: int
    ) -> Optional[Comment]:
        """Add deltas to both counters (floored at 0) and recompute score."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        upvotes = max(comment.upvote_count + upvote_delta, 0)
        downvotes = max(comment.downvote_count + downvote_delta, 0)
        updated = comment.evolve(
            upvote_count=upvotes,
            downvote_count=downvotes,
            score=upvotes - downvotes,
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        self._comments.pop(comment_id, None)
