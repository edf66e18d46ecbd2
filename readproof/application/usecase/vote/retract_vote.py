"""Retract vote use case."""

from uuid import UUID

from pydantic import BaseModel

from readproof.application.usecase.base import BaseUseCase, SignedRequest
from readproof.domain.service import SignedActionService, VoteService
from readproof.domain.value import ActionType, CommentId


class RetractVoteRequest(SignedRequest):
    """Retract vote request."""

    comment_id: UUID


class RetractVoteResponse(BaseModel):
    """Retract vote response."""

    comment_id: str
    score: int


class RetractVoteUseCase(BaseUseCase):
    """Use case for removing one's vote from a comment.

    The signed message binds only the comment id, not the type being removed.
    """

    def __init__(
        self,
        signed_action_service: SignedActionService,
        vote_service: VoteService,
    ) -> None:
        self.signed_action_service = signed_action_service
        self.vote_service = vote_service

    async def execute(self, request: RetractVoteRequest) -> RetractVoteResponse:
        voter = request.claimed_identity
        comment_id = CommentId(request.comment_id)

        self.signed_action_service.authenticate(
            ActionType.UNVOTE,
            request.message,
            request.signature,
            voter,
            expected={"comment_id": comment_id},
        )

        tally = await self.vote_service.retract_vote(comment_id, voter)
        return RetractVoteResponse(comment_id=str(comment_id), score=tally.score)
