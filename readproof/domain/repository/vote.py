"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from readproof.domain.model.vote import Vote
from readproof.domain.value import CommentId, Identity, VoteId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_comment_and_voter(
        self, comment_id: CommentId, voter: Identity
    ) -> Optional[Vote]:
        """Find a voter's vote on a comment.

        Args:
            comment_id: ID of the comment
            voter: The voter's identity

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Storage enforces uniqueness of (comment_id, voter).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the voter already has a vote on this comment
        """
        pass

    @abstractmethod
    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Optional[Vote]:
        """Overwrite the type of an existing vote.

        Returns:
            The updated vote, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete every vote on a comment.

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count votes on a comment."""
        pass
