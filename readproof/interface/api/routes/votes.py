"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from readproof.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    RetractVoteRequest,
    RetractVoteResponse,
    RetractVoteUseCase,
)

from .signed import SignedAPIRequest

router = APIRouter(prefix="/comments", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(SignedAPIRequest):
    """API request for voting on a comment."""

    vote_type: str  # "upvote" or "downvote"


@router.post("/{comment_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    comment_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Upvote or downvote a comment, or switch an existing vote.

    Casting the same vote twice is rejected with 409.
    """
    use_case_request = CastVoteRequest(
        comment_id=comment_id,
        vote_type=request.vote_type,
        identity=request.identity,
        signature=request.signature,
        message=request.message,
    )
    return await cast_vote_use_case.execute(use_case_request)


@router.delete("/{comment_id}/vote", response_model=RetractVoteResponse)
async def retract_vote(
    comment_id: str,
    request: SignedAPIRequest,
    retract_vote_use_case: FromDishka[RetractVoteUseCase],
) -> RetractVoteResponse:
    """Remove the caller's vote from a comment."""
    use_case_request = RetractVoteRequest(
        comment_id=comment_id,
        identity=request.identity,
        signature=request.signature,
        message=request.message,
    )
    return await retract_vote_use_case.execute(use_case_request)
