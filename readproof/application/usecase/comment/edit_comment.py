"""Edit comment use case."""

from uuid import UUID

from pydantic import Field

from readproof.application.usecase.base import BaseUseCase, SignedRequest
from readproof.domain.model.comment import MAX_RAW_CONTENT_LENGTH
from readproof.domain.service import CommentService, SignedActionService
from readproof.domain.value import ActionType, CommentId

from .views import CommentView


class EditCommentRequest(SignedRequest):
    """Edit comment request."""

    comment_id: UUID
    content: str = Field(min_length=1, max_length=MAX_RAW_CONTENT_LENGTH)


class EditCommentUseCase(BaseUseCase):
    """Use case for editing the content of one's own comment."""

    def __init__(
        self,
        signed_action_service: SignedActionService,
        comment_service: CommentService,
    ) -> None:
        """Initialize edit comment use case.

        Args:
            signed_action_service: Signed action authentication
            comment_service: Comment domain service
        """
        self.signed_action_service = signed_action_service
        self.comment_service = comment_service

    async def execute(self, request: EditCommentRequest) -> CommentView:
        """Execute edit comment flow.

        Raises:
            ReplayError: If the message is stale or targets another comment
            AuthenticationError: If the signature wasn't made by identity
            NotFoundError: If the comment doesn't exist
            AuthorizationError: If identity isn't the author
            ConflictError: If the comment was deleted
        """
        requester = request.claimed_identity
        comment_id = CommentId(request.comment_id)

        self.signed_action_service.authenticate(
            ActionType.EDIT_COMMENT,
            request.message,
            request.signature,
            requester,
            expected={"comment_id": comment_id, "content": request.content},
        )

        comment = await self.comment_service.edit_comment(
            comment_id, requester, request.content
        )
        return CommentView.from_comment(comment)
