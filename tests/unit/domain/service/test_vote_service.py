"""Unit tests for VoteService."""

import pytest

from readproof.domain.error import ConflictError, ErrorCode, NotFoundError
from readproof.domain.repository import CommentRepository, VoteRepository
from readproof.domain.service import CommentService, VoteService
from readproof.domain.value import Identity, VoteType
from tests.conftest import make_comment
from tests.harness import create_env_fixture
from tests.signing import ALICE, BOB, MALLORY

# Unit test fixture
unit_env = create_env_fixture()

VOTER = Identity(BOB.address)


async def stored_comment(unit_env, **changes):
    comment_repo = await unit_env.get(CommentRepository)
    return await comment_repo.save(make_comment(**changes))


class TestCastVote:
    """Tests for cast_vote method."""

    @pytest.mark.asyncio
    async def test_upvote_increments_counters(self, unit_env):
        """A first upvote creates the vote and raises the score."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        comment = await stored_comment(unit_env)

        # Act
        tally = await vote_service.cast_vote(comment.id, VOTER, VoteType.UP)

        # Assert
        assert (tally.upvote_count, tally.downvote_count, tally.score) == (1, 0, 1)
        assert tally.user_vote is VoteType.UP
        saved_vote = await vote_repo.find_by_comment_and_voter(comment.id, VOTER)
        assert saved_vote.vote_type is VoteType.UP

    @pytest.mark.asyncio
    async def test_downvote_lowers_score(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        comment = await stored_comment(unit_env)

        tally = await vote_service.cast_vote(comment.id, VOTER, VoteType.DOWN)

        assert (tally.upvote_count, tally.downvote_count, tally.score) == (0, 1, -1)

    @pytest.mark.asyncio
    async def test_switching_vote_moves_the_count(self, unit_env):
        """Up then down leaves exactly one downvote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        comment = await stored_comment(unit_env)
        await vote_service.cast_vote(comment.id, VOTER, VoteType.UP)

        # Act
        tally = await vote_service.cast_vote(comment.id, VOTER, VoteType.DOWN)

        # Assert
        assert (tally.upvote_count, tally.downvote_count) == (0, 1)
        assert tally.score == -1
        assert await vote_repo.count_by_comment(comment.id) == 1

    @pytest.mark.asyncio
    async def test_duplicate_vote_rejected_without_changing_counts(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await stored_comment(unit_env)
        await vote_service.cast_vote(comment.id, VOTER, VoteType.UP)

        # Act & Assert
        with pytest.raises(ConflictError, match="Already upvoted") as exc_info:
            await vote_service.cast_vote(comment.id, VOTER, VoteType.UP)
        assert exc_info.value.code is ErrorCode.DUPLICATE_VOTE

        stored = await comment_repo.find_by_id(comment.id)
        assert (stored.upvote_count, stored.downvote_count) == (1, 0)

    @pytest.mark.asyncio
    async def test_votes_from_different_voters_accumulate(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        comment = await stored_comment(unit_env)

        await vote_service.cast_vote(comment.id, Identity(ALICE.address), VoteType.UP)
        await vote_service.cast_vote(comment.id, VOTER, VoteType.UP)
        tally = await vote_service.cast_vote(
            comment.id, Identity(MALLORY.address), VoteType.DOWN
        )

        assert (tally.upvote_count, tally.downvote_count, tally.score) == (2, 1, 1)

    @pytest.mark.asyncio
    async def test_voter_identity_is_case_insensitive(self, unit_env):
        """Checksummed and lowercase forms are the same voter."""
        vote_service = await unit_env.get(VoteService)
        comment = await stored_comment(unit_env)
        await vote_service.cast_vote(comment.id, Identity(BOB.address), VoteType.UP)

        with pytest.raises(ConflictError):
            await vote_service.cast_vote(
                comment.id, Identity(BOB.address.lower()), VoteType.UP
            )

    @pytest.mark.asyncio
    async def test_vote_on_missing_comment_rejected(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.cast_vote(make_comment().id, VOTER, VoteType.UP)
        assert exc_info.value.code is ErrorCode.COMMENT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_counter_never_goes_below_zero(self, unit_env):
        """A drifted counter is clamped instead of going negative."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        comment = await stored_comment(unit_env)
        await vote_service.cast_vote(comment.id, VOTER, VoteType.UP)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.adjust_vote_counts(comment.id, -1, 0)

        # Act
        tally = await vote_service.retract_vote(comment.id, VOTER)

        # Assert
        assert tally.score == 0
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.upvote_count == 0
        assert await vote_repo.find_by_comment_and_voter(comment.id, VOTER) is None


class TestRetractVote:
    """Tests for retract_vote method."""

    @pytest.mark.asyncio
    async def test_retract_deletes_vote_and_restores_score(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        comment = await stored_comment(unit_env)
        await vote_service.cast_vote(comment.id, VOTER, VoteType.DOWN)

        # Act
        tally = await vote_service.retract_vote(comment.id, VOTER)

        # Assert
        assert tally.score == 0
        assert (tally.upvote_count, tally.downvote_count) == (0, 0)
        assert await vote_repo.find_by_comment_and_voter(comment.id, VOTER) is None

    @pytest.mark.asyncio
    async def test_retract_without_vote_rejected(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        comment = await stored_comment(unit_env)

        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.retract_vote(comment.id, VOTER)
        assert exc_info.value.code is ErrorCode.VOTE_NOT_FOUND

    @pytest.mark.asyncio
    async def test_retract_after_hard_delete_finds_no_vote(self, unit_env):
        """Hard-deleting a comment takes its votes with it."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_service = await unit_env.get(CommentService)
        comment = await stored_comment(unit_env)
        await vote_service.cast_vote(comment.id, VOTER, VoteType.UP)
        await comment_service.delete_comment(comment.id, Identity(ALICE.address))

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.retract_vote(comment.id, VOTER)
        assert exc_info.value.code is ErrorCode.VOTE_NOT_FOUND
