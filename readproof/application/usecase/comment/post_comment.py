"""Post comment use case."""

from uuid import UUID

from pydantic import Field

from readproof.application.usecase.base import BaseUseCase, SignedRequest
from readproof.domain.model.comment import MAX_RAW_CONTENT_LENGTH
from readproof.domain.service import (
    CommentService,
    NamingService,
    SignatureService,
    SignedActionService,
)
from readproof.domain.value import ActionType, CommentId, ThreadId

from .views import CommentView


class PostCommentRequest(SignedRequest):
    """Post comment request."""

    thread_id: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1, max_length=MAX_RAW_CONTENT_LENGTH)
    parent_id: UUID | None = None  # Parent comment ID for replies


class PostCommentUseCase(BaseUseCase):
    """Use case for posting a top-level comment or a reply."""

    def __init__(
        self,
        signed_action_service: SignedActionService,
        comment_service: CommentService,
        naming_service: NamingService,
    ) -> None:
        """Initialize post comment use case.

        Args:
            signed_action_service: Signed action authentication
            comment_service: Comment domain service
            naming_service: Display name resolution for the author
        """
        self.signed_action_service = signed_action_service
        self.comment_service = comment_service
        self.naming_service = naming_service

    async def execute(self, request: PostCommentRequest) -> CommentView:
        """Execute post comment flow.

        Steps:
        1. Authenticate the signed message (freshness, embedded ids, signer)
        2. Resolve the author's display name (best effort)
        3. Create the comment (validates parent for replies)

        Raises:
            ReplayError: If the message is stale or targets another thread/parent
            AuthenticationError: If the signature wasn't made by identity
            NotFoundError: If the parent comment doesn't exist
            ConflictError: If the parent is itself a reply
        """
        author = request.claimed_identity
        thread_id = ThreadId(request.thread_id)
        parent_id = CommentId(request.parent_id) if request.parent_id else None

        self.signed_action_service.authenticate(
            ActionType.POST_COMMENT,
            request.message,
            request.signature,
            author,
            expected={
                "thread_id": thread_id,
                "parent_id": parent_id,
                "content": request.content,
            },
        )

        display_name = await self.naming_service.display_name(author)

        comment = await self.comment_service.create_comment(
            thread_id=thread_id,
            author=author,
            content=request.content,
            signature=request.signature,
            message_hash=SignatureService.hash_message(request.message),
            parent_id=parent_id,
            author_display_name=display_name,
        )
        return CommentView.from_comment(comment)
