"""Vote domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from readproof.domain.error import ConflictError, ErrorCode, InternalError, NotFoundError
from readproof.domain.model.comment import Comment
from readproof.domain.model.vote import Vote
from readproof.domain.repository import CommentRepository, VoteRepository
from readproof.domain.value import CommentId, Identity, VoteId, VoteTally, VoteType

from .base import Service

clamped_counter = logfire.metric_counter(
    "vote_counter_clamped",
    unit="1",
    description="Vote counter decrements that would have gone below zero",
)


def counter_deltas(vote_type: VoteType, amount: int) -> tuple[int, int]:
    """Map a change on one vote type to (upvote_delta, downvote_delta)."""
    if vote_type is VoteType.UP:
        return amount, 0
    return 0, amount


class VoteService(Service):
    """Domain service for vote operations.

    All counter changes go through a single atomic update on the comment row,
    taken after the comment has been locked.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            comment_repository: Comment repository, owner of the counters
        """
        self.vote_repository = vote_repository
        self.comment_repository = comment_repository

    async def _adjust(
        self, comment: Comment, upvote_delta: int, downvote_delta: int
    ) -> Comment:
        for counter, current, delta in (
            ("upvote_count", comment.upvote_count, upvote_delta),
            ("downvote_count", comment.downvote_count, downvote_delta),
        ):
            if current + delta < 0:
                logfire.warn(
                    "Vote counter clamped at zero",
                    comment_id=str(comment.id),
                    counter=counter,
                    current=current,
                    delta=delta,
                )
                clamped_counter.add(1, {"counter": counter})

        updated = await self.comment_repository.adjust_vote_counts(
            comment.id, upvote_delta, downvote_delta
        )
        if updated is None:
            raise InternalError(f"Comment vanished while locked: {comment.id}")
        return updated

    async def cast_vote(
        self, comment_id: CommentId, voter: Identity, vote_type: VoteType
    ) -> VoteTally:
        """Cast or switch a vote on a comment.

        Args:
            comment_id: Comment ID
            voter: Voter identity
            vote_type: Requested vote type

        Returns:
            Counters after the vote

        Raises:
            NotFoundError: If the comment doesn't exist
            ConflictError: If the voter already holds a vote of this type
        """
        with logfire.span(
            "vote_service.cast_vote",
            comment_id=str(comment_id),
            voter=voter.root,
            vote_type=vote_type.value,
        ):
            comment = await self.comment_repository.find_by_id_for_update(comment_id)
            if not comment:
                logfire.warn("Vote on non-existent comment", comment_id=str(comment_id))
                raise NotFoundError(
                    "Comment", str(comment_id), ErrorCode.COMMENT_NOT_FOUND
                )

            existing = await self.vote_repository.find_by_comment_and_voter(
                comment_id, voter
            )

            if existing is None:
                vote = Vote(
                    id=VoteId(uuid4()),
                    comment_id=comment_id,
                    voter=voter,
                    vote_type=vote_type,
                    created_at=datetime.now(),
                    updated_at=datetime.now(),
                )
                try:
                    await self.vote_repository.save(vote)
                except IntegrityError:
                    logfire.warn(
                        "Duplicate vote attempt",
                        voter=voter.root,
                        comment_id=str(comment_id),
                    )
                    raise ConflictError(
                        "Already voted on this comment", ErrorCode.DUPLICATE_VOTE
                    )
                updated = await self._adjust(comment, *counter_deltas(vote_type, 1))
                logfire.info(
                    "Vote cast",
                    comment_id=str(comment_id),
                    voter=voter.root,
                    vote_type=vote_type.value,
                )

            elif existing.vote_type is vote_type:
                logfire.warn(
                    "Duplicate vote attempt",
                    voter=voter.root,
                    comment_id=str(comment_id),
                    vote_type=vote_type.value,
                )
                raise ConflictError(
                    f"Already {vote_type.value}d this comment", ErrorCode.DUPLICATE_VOTE
                )

            else:
                old_up, old_down = counter_deltas(existing.vote_type, -1)
                new_up, new_down = counter_deltas(vote_type, 1)
                updated = await self._adjust(
                    comment, old_up + new_up, old_down + new_down
                )
                await self.vote_repository.update_type(existing.id, vote_type)
                logfire.info(
                    "Vote switched",
                    comment_id=str(comment_id),
                    voter=voter.root,
                    from_type=existing.vote_type.value,
                    to_type=vote_type.value,
                )

            return VoteTally(
                score=updated.score,
                upvote_count=updated.upvote_count,
                downvote_count=updated.downvote_count,
                user_vote=vote_type,
            )

    async def retract_vote(self, comment_id: CommentId, voter: Identity) -> VoteTally:
        """Remove a voter's vote from a comment.

        Args:
            comment_id: Comment ID
            voter: Voter identity

        Returns:
            Counters after the retraction (score 0 if the comment is gone)

        Raises:
            NotFoundError: If the voter holds no vote on the comment
        """
        with logfire.span(
            "vote_service.retract_vote",
            comment_id=str(comment_id),
            voter=voter.root,
        ):
            comment = await self.comment_repository.find_by_id_for_update(comment_id)

            existing = await self.vote_repository.find_by_comment_and_voter(
                comment_id, voter
            )
            if existing is None:
                logfire.info(
                    "No vote to remove from comment",
                    comment_id=str(comment_id),
                    voter=voter.root,
                )
                raise NotFoundError(
                    "Vote",
                    f"{comment_id}/{voter.root}",
                    ErrorCode.VOTE_NOT_FOUND,
                )

            tally = VoteTally(score=0)
            if comment is not None:
                updated = await self._adjust(
                    comment, *counter_deltas(existing.vote_type, -1)
                )
                tally = VoteTally(
                    score=updated.score,
                    upvote_count=updated.upvote_count,
                    downvote_count=updated.downvote_count,
                )

            await self.vote_repository.delete(existing.id)
            logfire.info(
                "Vote removed from comment",
                comment_id=str(comment_id),
                voter=voter.root,
                vote_type=existing.vote_type.value,
            )
            return tally
