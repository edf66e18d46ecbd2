"""Sign-as-read use cases."""

from .get_badge_record import (
    GetBadgeRecordRequest,
    GetBadgeRecordResponse,
    GetBadgeRecordUseCase,
)
from .list_readers import ListReadersRequest, ListReadersResponse, ListReadersUseCase
from .sign_read import SignReadRequest, SignReadUseCase
from .views import ReadReceiptView

__all__ = [
    "GetBadgeRecordRequest",
    "GetBadgeRecordResponse",
    "GetBadgeRecordUseCase",
    "ListReadersRequest",
    "ListReadersResponse",
    "ListReadersUseCase",
    "ReadReceiptView",
    "SignReadRequest",
    "SignReadUseCase",
]
