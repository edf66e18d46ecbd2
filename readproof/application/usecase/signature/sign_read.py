"""Sign-as-read use case."""

from pydantic import Field

from readproof.application.usecase.base import BaseUseCase, SignedRequest
from readproof.domain.service import (
    ReadReceiptService,
    SignatureService,
    SignedActionService,
)
from readproof.domain.value import ActionType, ThreadId

from .views import ReadReceiptView


class SignReadRequest(SignedRequest):
    """Sign-as-read request."""

    thread_id: str = Field(min_length=1, max_length=255)


class SignReadUseCase(BaseUseCase):
    """Use case for attesting that a reader read a thread's article."""

    def __init__(
        self,
        signed_action_service: SignedActionService,
        read_receipt_service: ReadReceiptService,
    ) -> None:
        """Initialize sign-as-read use case.

        Args:
            signed_action_service: Signed action authentication
            read_receipt_service: Read receipt domain service
        """
        self.signed_action_service = signed_action_service
        self.read_receipt_service = read_receipt_service

    async def execute(self, request: SignReadRequest) -> ReadReceiptView:
        """Execute sign-as-read flow.

        Signing the same thread again refreshes the existing receipt.

        Raises:
            ReplayError: If the message is stale or names another thread
            AuthenticationError: If the signature wasn't made by identity
        """
        reader = request.claimed_identity
        thread_id = ThreadId(request.thread_id)

        self.signed_action_service.authenticate(
            ActionType.SIGN_READ,
            request.message,
            request.signature,
            reader,
            expected={"thread_id": thread_id},
        )

        receipt = await self.read_receipt_service.record_read(
            thread_id=thread_id,
            reader=reader,
            signature=request.signature,
            message_hash=SignatureService.hash_message(request.message),
        )
        return ReadReceiptView.from_receipt(receipt)
