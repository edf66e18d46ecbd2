"""Read receipt repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from readproof.domain.model.read_receipt import ReadReceipt
from readproof.domain.value import Identity, ThreadId


class ReadReceiptRepository(ABC):
    """Repository for ReadReceipt entity."""

    @abstractmethod
    async def find_by_thread_and_reader(
        self, thread_id: ThreadId, reader: Identity
    ) -> Optional[ReadReceipt]:
        """Find a reader's receipt for a thread."""
        pass

    @abstractmethod
    async def upsert(self, receipt: ReadReceipt) -> ReadReceipt:
        """Insert a receipt, or refresh the existing one for (reader, thread).

        On conflict the existing row keeps its id; signature, message_hash,
        display_name and signed_at are overwritten.

        Returns:
            The stored receipt
        """
        pass

    @abstractmethod
    async def find_by_thread(
        self, thread_id: ThreadId, limit: int, offset: int = 0
    ) -> List[ReadReceipt]:
        """Find receipts for a thread, most recently signed first."""
        pass

    @abstractmethod
    async def count_by_thread(self, thread_id: ThreadId) -> int:
        """Count receipts for a thread."""
        pass
