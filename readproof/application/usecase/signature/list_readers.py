"""List readers use case."""

from pydantic import BaseModel, Field

from readproof.application.usecase.base import BaseUseCase
from readproof.domain.service import ReadReceiptService
from readproof.domain.value import ThreadId

from .views import ReadReceiptView


class ListReadersRequest(BaseModel):
    """List readers request."""

    thread_id: str = Field(min_length=1, max_length=255)
    limit: int = Field(default=100, ge=1)
    offset: int = Field(default=0, ge=0)


class ListReadersResponse(BaseModel):
    """List readers response."""

    thread_id: str
    count: int
    readers: list[ReadReceiptView]


class ListReadersUseCase(BaseUseCase):
    """Use case for listing who signed a thread, newest first."""

    def __init__(self, read_receipt_service: ReadReceiptService) -> None:
        self.read_receipt_service = read_receipt_service

    async def execute(self, request: ListReadersRequest) -> ListReadersResponse:
        page = await self.read_receipt_service.list_readers(
            ThreadId(request.thread_id), request.limit, request.offset
        )
        return ListReadersResponse(
            thread_id=page.thread_id,
            count=page.count,
            readers=[ReadReceiptView.from_receipt(r) for r in page.readers],
        )
