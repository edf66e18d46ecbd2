"""Read receipt domain service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from readproof.domain.error import ErrorCode, NotFoundError
from readproof.domain.model.read_receipt import ReadReceipt
from readproof.domain.repository import ReadReceiptRepository
from readproof.domain.value import BadgeRecord, Identity, ReadReceiptId, ThreadId

from .base import Service
from .naming_service import NamingService


@dataclass
class ReaderPage:
    thread_id: ThreadId
    count: int
    readers: list[ReadReceipt]


class ReadReceiptService(Service):
    """Domain service for sign-as-read attestations."""

    def __init__(
        self,
        read_receipt_repository: ReadReceiptRepository,
        naming_service: NamingService,
        max_page_size: int = 100,
    ) -> None:
        """Initialize read receipt service.

        Args:
            read_receipt_repository: Read receipt repository
            naming_service: Best-effort display name resolution
            max_page_size: Upper bound for readers per page
        """
        self.read_receipt_repository = read_receipt_repository
        self.naming_service = naming_service
        self.max_page_size = max_page_size

    async def record_read(
        self,
        thread_id: ThreadId,
        reader: Identity,
        signature: str,
        message_hash: str,
    ) -> ReadReceipt:
        """Record (or refresh) a reader's signed attestation for a thread.

        A display name already cached on an earlier receipt is reused instead
        of resolving it again.
        """
        with logfire.span(
            "read_receipt_service.record_read",
            thread_id=thread_id,
            reader=reader.root,
        ):
            existing = await self.read_receipt_repository.find_by_thread_and_reader(
                thread_id, reader
            )
            if existing and existing.display_name:
                display_name: str | None = existing.display_name
            else:
                display_name = await self.naming_service.display_name(reader)

            receipt = ReadReceipt(
                id=existing.id if existing else ReadReceiptId(uuid4()),
                thread_id=thread_id,
                reader=reader,
                display_name=display_name,
                signature=signature,
                message_hash=message_hash,
                signed_at=datetime.now(),
            )
            stored = await self.read_receipt_repository.upsert(receipt)
            logfire.info(
                "Read receipt recorded",
                thread_id=thread_id,
                reader=reader.root,
                refreshed=existing is not None,
            )
            return stored

    async def list_readers(
        self, thread_id: ThreadId, limit: int = 100, offset: int = 0
    ) -> ReaderPage:
        """List readers of a thread, most recently signed first."""
        limit = max(1, min(limit, self.max_page_size))
        offset = max(0, offset)
        with logfire.span(
            "read_receipt_service.list_readers",
            thread_id=thread_id,
            limit=limit,
            offset=offset,
        ):
            readers = await self.read_receipt_repository.find_by_thread(
                thread_id, limit, offset
            )
            count = await self.read_receipt_repository.count_by_thread(thread_id)
            return ReaderPage(thread_id=thread_id, count=count, readers=readers)

    async def get_badge_record(
        self,
        thread_id: ThreadId,
        reader: Identity,
        thread_title: str | None = None,
        thread_date: str | None = None,
    ) -> BadgeRecord:
        """Get the record a badge is generated from.

        Args:
            thread_id: Thread the reader signed
            reader: Reader identity
            thread_title: Title to render on the badge
            thread_date: Publication date to render on the badge

        Raises:
            NotFoundError: If the reader never signed this thread
        """
        with logfire.span(
            "read_receipt_service.get_badge_record",
            thread_id=thread_id,
            reader=reader.root,
        ):
            receipt = await self.read_receipt_repository.find_by_thread_and_reader(
                thread_id, reader
            )
            if receipt is None:
                logfire.warn(
                    "Badge requested for unsigned reader",
                    thread_id=thread_id,
                    reader=reader.root,
                )
                raise NotFoundError(
                    "Read receipt",
                    f"{thread_id}/{reader.root}",
                    ErrorCode.READ_RECEIPT_NOT_FOUND,
                )
            return BadgeRecord(
                thread_id=receipt.thread_id,
                identity=receipt.reader,
                display_name=receipt.display_name,
                signed_at=receipt.signed_at,
                signature=receipt.signature,
                thread_title=thread_title,
                thread_date=thread_date,
            )
