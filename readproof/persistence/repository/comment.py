"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import desc, exists, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from readproof.domain.model import DELETED_CONTENT, Comment
from readproof.domain.repository import CommentRepository
from readproof.domain.value import CommentId, CommentSort, ThreadId
from readproof.persistence.mappers import comment_to_dict, row_to_comment
from readproof.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, holding a row lock until the transaction ends."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.id == comment_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(
        self,
        thread_id: ThreadId,
        sort: CommentSort,
        limit: int,
        offset: int = 0,
    ) -> List[Comment]:
        """Find a page of top-level comments for a thread."""
        stmt = select(comments_table).where(
            comments_table.c.thread_id == thread_id,
            comments_table.c.parent_id.is_(None),
        )

        if sort is CommentSort.SCORE:
            stmt = stmt.order_by(
                desc(comments_table.c.score), desc(comments_table.c.created_at)
            )
        else:
            stmt = stmt.order_by(desc(comments_table.c.created_at))

        stmt = stmt.limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find replies of several parents in one query, oldest first."""
        if not parent_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.in_(list(parent_ids)))
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def has_replies(self, comment_id: CommentId) -> bool:
        """Check whether any comment references this one as parent."""
        stmt = select(exists().where(comments_table.c.parent_id == comment_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def count_by_thread(self, thread_id: ThreadId) -> int:
        """Count all comments for a thread, replies and soft-deleted included."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.thread_id == thread_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace content of a live comment and mark it edited."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(False))
            .values(content=content, is_edited=True, edited_at=edited_at)
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Comment not found or deleted
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def mark_deleted(self, comment_id: CommentId) -> Optional[Comment]:
        """Soft delete, keeping counters and replies in place."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=DELETED_CONTENT, is_deleted=True)
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def adjust_vote_counts(
        self, comment_id: CommentId, upvote_delta: int, downvote_delta: int
    ) -> Optional[Comment]:
        """Atomically add deltas to both counters (floored at 0) and recompute score."""
        upvotes = func.greatest(comments_table.c.upvote_count + upvote_delta, 0)
        downvotes = func.greatest(comments_table.c.downvote_count + downvote_delta, 0)
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                upvote_count=upvotes,
                downvote_count=downvotes,
                # SET expressions all read the pre-update row
                score=upvotes - downvotes,
            )
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()
