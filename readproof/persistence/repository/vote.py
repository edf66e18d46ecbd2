"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from readproof.domain.model import Vote
from readproof.domain.repository import VoteRepository
from readproof.domain.value import CommentId, Identity, VoteId, VoteType
from readproof.persistence.mappers import row_to_vote, vote_to_dict
from readproof.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_comment_and_voter(
        self, comment_id: CommentId, voter: Identity
    ) -> Optional[Vote]:
        """Find a voter's vote on a comment."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.comment_id == comment_id,
                votes_table.c.voter == voter.root,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Raises:
            IntegrityError: On a second vote by the same voter (unique_vote)
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        # Savepoint keeps the request transaction usable after a duplicate
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Optional[Vote]:
        """Overwrite the type of an existing vote."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(vote_type=vote_type.value, updated_at=datetime.now())
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_vote(row._asdict())

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete every vote on a comment."""
        stmt = delete(votes_table).where(votes_table.c.comment_id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count votes on a comment."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.comment_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
