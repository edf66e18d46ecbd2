"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .retract_vote import RetractVoteRequest, RetractVoteResponse, RetractVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "RetractVoteRequest",
    "RetractVoteResponse",
    "RetractVoteUseCase",
]
