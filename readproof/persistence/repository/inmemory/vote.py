"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from readproof.domain.model.vote import Vote
from readproof.domain.repository.vote import VoteRepository
from readproof.domain.value import CommentId, Identity, VoteId, VoteType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_comment_and_voter(
        self, comment_id: CommentId, voter: Identity
    ) -> Optional[Vote]:
        """Find a voter's vote on a comment."""
        for vote in self._votes:
            if vote.comment_id == comment_id and vote.voter == voter:
                return vote
        return None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        existing = await self.find_by_comment_and_voter(vote.comment_id, vote.voter)
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Optional[Vote]:
        """Overwrite the type of an existing vote."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id:
                updated = vote.evolve(vote_type=vote_type, updated_at=datetime.now())
                self._votes[i] = updated
                return updated
        return None

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote by ID."""
        self._votes = [v for v in self._votes if v.id != vote_id]

    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete every vote on a comment."""
        before = len(self._votes)
        self._votes = [v for v in self._votes if v.comment_id != comment_id]
        return before - len(self._votes)

    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count votes on a comment."""
        return sum(1 for v in self._votes if v.comment_id == comment_id)
