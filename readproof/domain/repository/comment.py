"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from readproof.domain.model.comment import Comment
from readproof.domain.value import CommentId, CommentSort, ThreadId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID and lock it for the current transaction.

        Every read-modify-write on a comment's counters or on its reply set
        goes through this lock, so concurrent votes, retractions, deletes and
        replies against the same comment are applied one after another.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        thread_id: ThreadId,
        sort: CommentSort,
        limit: int,
        offset: int = 0,
    ) -> List[Comment]:
        """Find a page of top-level comments for a thread.

        Args:
            thread_id: The thread ID
            sort: SCORE orders by (score desc, created_at desc),
                RECENT by created_at desc
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Page of depth-0 comments
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find replies of several parents at once, oldest first.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Replies ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def has_replies(self, comment_id: CommentId) -> bool:
        """Check whether any comment references this one as parent."""
        pass

    @abstractmethod
    async def count_by_thread(self, thread_id: ThreadId) -> int:
        """Count all comments (any depth, including soft-deleted) in a thread."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace content of a live comment and mark it edited.

        Returns:
            Updated comment, None if it doesn't exist or is soft-deleted
        """
        pass

    @abstractmethod
    async def mark_deleted(self, comment_id: CommentId) -> Optional[Comment]:
        """Soft delete: replace content with the sentinel and set is_deleted.

        Vote counters are left untouched.

        Returns:
            Updated comment, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def adjust_vote_counts(
        self, comment_id: CommentId, upvote_delta: int, downvote_delta: int
    ) -> Optional[Comment]:
        """Atomically add deltas to the vote counters and recompute score.

        Each counter is floored at 0 and score is recomputed in the same
        update, so counters and score can never disagree.

        Returns:
            Updated comment, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete).

        Args:
            comment_id: The comment ID to delete
        """
        pass
