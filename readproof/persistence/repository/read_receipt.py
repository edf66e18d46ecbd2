"""PostgreSQL implementation of ReadReceipt repository."""

from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from readproof.domain.model import ReadReceipt
from readproof.domain.repository import ReadReceiptRepository
from readproof.domain.value import Identity, ThreadId
from readproof.persistence.mappers import read_receipt_to_dict, row_to_read_receipt
from readproof.persistence.tables import read_receipts_table


class PostgresReadReceiptRepository(ReadReceiptRepository):
    """PostgreSQL implementation of ReadReceiptRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_thread_and_reader(
        self, thread_id: ThreadId, reader: Identity
    ) -> Optional[ReadReceipt]:
        """Find a reader's receipt for a thread."""
        stmt = select(read_receipts_table).where(
            read_receipts_table.c.thread_id == thread_id,
            read_receipts_table.c.reader == reader.root,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_read_receipt(row._asdict()) if row else None

    async def upsert(self, receipt: ReadReceipt) -> ReadReceipt:
        """Insert a receipt or refresh the existing (reader, thread) row."""
        values = read_receipt_to_dict(receipt)
        stmt = insert(read_receipts_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            constraint="unique_read_receipt",
            set_={
                "display_name": stmt.excluded.display_name,
                "signature": stmt.excluded.signature,
                "message_hash": stmt.excluded.message_hash,
                "signed_at": stmt.excluded.signed_at,
            },
        ).returning(read_receipts_table)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_read_receipt(row._asdict()) if row else receipt

    async def find_by_thread(
        self, thread_id: ThreadId, limit: int, offset: int = 0
    ) -> List[ReadReceipt]:
        """Find receipts for a thread, most recently signed first."""
        stmt = (
            select(read_receipts_table)
            .where(read_receipts_table.c.thread_id == thread_id)
            .order_by(desc(read_receipts_table.c.signed_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_read_receipt(row._asdict()) for row in result.fetchall()]

    async def count_by_thread(self, thread_id: ThreadId) -> int:
        """Count receipts for a thread."""
        stmt = (
            select(func.count())
            .select_from(read_receipts_table)
            .where(read_receipts_table.c.thread_id == thread_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
