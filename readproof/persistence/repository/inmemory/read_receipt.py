"""In-memory read receipt repository for testing."""

from typing import Optional

from readproof.domain.model.read_receipt import ReadReceipt
from readproof.domain.repository.read_receipt import ReadReceiptRepository
from readproof.domain.value import Identity, ThreadId


class InMemoryReadReceiptRepository(ReadReceiptRepository):
    """In-memory implementation of ReadReceiptRepository for testing."""

    def __init__(self) -> None:
        self._receipts: dict[tuple[str, str], ReadReceipt] = {}

    async def find_by_thread_and_reader(
        self, thread_id: ThreadId, reader: Identity
    ) -> Optional[ReadReceipt]:
        """Find a reader's receipt for a thread."""
        return self._receipts.get((reader.root, thread_id))

    async def upsert(self, receipt: ReadReceipt) -> ReadReceipt:
        """Insert a receipt or refresh the existing (reader, thread) entry."""
        key = (receipt.reader.root, receipt.thread_id)
        existing = self._receipts.get(key)
        if existing:
            receipt = existing.evolve(
                display_name=receipt.display_name,
                signature=receipt.signature,
                message_hash=receipt.message_hash,
                signed_at=receipt.signed_at,
            )
        self._receipts[key] = receipt
        return receipt

    async def find_by_thread(
        self, thread_id: ThreadId, limit: int, offset: int = 0
    ) -> list[ReadReceipt]:
        """Find receipts for a thread, most recently signed first."""
        receipts = [r for r in self._receipts.values() if r.thread_id == thread_id]
        receipts.sort(key=lambda r: r.signed_at, reverse=True)
        return receipts[offset : offset + limit]

    async def count_by_thread(self, thread_id: ThreadId) -> int:
        """Count receipts for a thread."""
        return sum(1 for r in self._receipts.values() if r.thread_id == thread_id)
