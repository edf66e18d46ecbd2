"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from readproof.application.usecase.base import BaseUseCase, SignedRequest
from readproof.domain.service import SignedActionService, VoteService
from readproof.domain.value import ActionType, CommentId, VoteType


class CastVoteRequest(SignedRequest):
    """Cast vote request."""

    comment_id: UUID
    vote_type: VoteType


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    comment_id: str
    score: int
    upvote_count: int
    downvote_count: int
    user_vote: VoteType


class CastVoteUseCase(BaseUseCase):
    """Use case for upvoting, downvoting, or switching a vote on a comment."""

    def __init__(
        self,
        signed_action_service: SignedActionService,
        vote_service: VoteService,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            signed_action_service: Signed action authentication
            vote_service: Vote domain service
        """
        self.signed_action_service = signed_action_service
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            ReplayError: If the message is stale or targets another comment
            AuthenticationError: If the signature wasn't made by identity
            NotFoundError: If the comment doesn't exist
            ConflictError: If the same vote was already cast
        """
        voter = request.claimed_identity
        comment_id = CommentId(request.comment_id)

        self.signed_action_service.authenticate(
            ActionType.VOTE,
            request.message,
            request.signature,
            voter,
            expected={"comment_id": comment_id, "vote_type": request.vote_type},
        )

        tally = await self.vote_service.cast_vote(comment_id, voter, request.vote_type)

        return CastVoteResponse(
            comment_id=str(comment_id),
            score=tally.score,
            upvote_count=tally.upvote_count,
            downvote_count=tally.downvote_count,
            user_vote=request.vote_type,
        )
