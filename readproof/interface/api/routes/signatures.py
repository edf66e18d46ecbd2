"""Sign-as-read routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from readproof.application.usecase.signature import (
    GetBadgeRecordRequest,
    GetBadgeRecordResponse,
    GetBadgeRecordUseCase,
    ListReadersRequest,
    ListReadersResponse,
    ListReadersUseCase,
    ReadReceiptView,
    SignReadRequest,
    SignReadUseCase,
)

from .signed import SignedAPIRequest

router = APIRouter(tags=["signatures"], route_class=DishkaRoute)


class SignReadAPIRequest(SignedAPIRequest):
    """API request for signing a thread as read."""

    thread_id: str


@router.post(
    "/signatures",
    response_model=ReadReceiptView,
    status_code=status.HTTP_201_CREATED,
)
async def sign_read(
    request: SignReadAPIRequest,
    sign_read_use_case: FromDishka[SignReadUseCase],
) -> ReadReceiptView:
    """Record that the signer read a thread's article.

    Signing again refreshes the existing receipt.
    """
    use_case_request = SignReadRequest(
        thread_id=request.thread_id,
        identity=request.identity,
        signature=request.signature,
        message=request.message,
    )
    return await sign_read_use_case.execute(use_case_request)


@router.get("/threads/{thread_id}/signatures", response_model=ListReadersResponse)
async def list_readers(
    thread_id: str,
    list_readers_use_case: FromDishka[ListReadersUseCase],
    limit: int = 100,
    offset: int = 0,
) -> ListReadersResponse:
    """List who signed a thread, most recent first."""
    use_case_request = ListReadersRequest(
        thread_id=thread_id, limit=limit, offset=offset
    )
    return await list_readers_use_case.execute(use_case_request)


@router.get(
    "/threads/{thread_id}/signatures/{address}",
    response_model=GetBadgeRecordResponse,
)
async def get_badge_record(
    thread_id: str,
    address: str,
    get_badge_record_use_case: FromDishka[GetBadgeRecordUseCase],
    title: str | None = None,
    date: str | None = None,
) -> GetBadgeRecordResponse:
    """Get the signed-read record a reader's badge is generated from.

    ``title`` and ``date`` describe the thread and are echoed into the record.
    """
    use_case_request = GetBadgeRecordRequest(
        thread_id=thread_id,
        identity=address,
        thread_title=title,
        thread_date=date,
    )
    return await get_badge_record_use_case.execute(use_case_request)
