"""Get badge record use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from readproof.application.usecase.base import ADDRESS_PATTERN, BaseUseCase
from readproof.domain.service import ReadReceiptService
from readproof.domain.value import Identity, ThreadId


class GetBadgeRecordRequest(BaseModel):
    """Get badge record request."""

    thread_id: str = Field(min_length=1, max_length=255)
    identity: str = Field(pattern=ADDRESS_PATTERN)
    thread_title: str | None = Field(default=None, max_length=500)
    thread_date: str | None = Field(default=None, max_length=64)


class GetBadgeRecordResponse(BaseModel):
    """Record a badge generator renders from."""

    thread_id: str
    identity: str
    display_name: str | None
    signed_at: datetime
    signature: str
    thread_title: str | None = None
    thread_date: str | None = None


class GetBadgeRecordUseCase(BaseUseCase):
    """Use case for serving the signed-read record behind a reader's badge."""

    def __init__(self, read_receipt_service: ReadReceiptService) -> None:
        self.read_receipt_service = read_receipt_service

    async def execute(self, request: GetBadgeRecordRequest) -> GetBadgeRecordResponse:
        """Execute get badge record flow.

        Raises:
            NotFoundError: If the reader never signed the thread
        """
        record = await self.read_receipt_service.get_badge_record(
            ThreadId(request.thread_id),
            Identity(request.identity),
            thread_title=request.thread_title,
            thread_date=request.thread_date,
        )
        return GetBadgeRecordResponse(
            thread_id=record.thread_id,
            identity=record.identity.root,
            display_name=record.display_name,
            signed_at=record.signed_at,
            signature=record.signature,
            thread_title=record.thread_title,
            thread_date=record.thread_date,
        )
