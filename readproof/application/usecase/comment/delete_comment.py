"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from readproof.application.usecase.base import BaseUseCase, SignedRequest
from readproof.domain.service import CommentService, SignedActionService
from readproof.domain.value import ActionType, CommentId, DeletionType


class DeleteCommentRequest(SignedRequest):
    """Delete comment request."""

    comment_id: UUID


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deletion_type: DeletionType


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting one's own comment.

    Comments with replies are soft-deleted, others are removed with their votes.
    """

    def __init__(
        self,
        signed_action_service: SignedActionService,
        comment_service: CommentService,
    ) -> None:
        self.signed_action_service = signed_action_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        requester = request.claimed_identity
        comment_id = CommentId(request.comment_id)

        self.signed_action_service.authenticate(
            ActionType.DELETE_COMMENT,
            request.message,
            request.signature,
            requester,
            expected={"comment_id": comment_id},
        )

        deletion_type = await self.comment_service.delete_comment(comment_id, requester)
        return DeleteCommentResponse(
            comment_id=str(comment_id), deletion_type=deletion_type
        )
