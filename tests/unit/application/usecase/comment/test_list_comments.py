"""Unit tests for ListCommentsUseCase."""

import pytest

from readproof.application.usecase.comment import (
    ListCommentsRequest,
    ListCommentsUseCase,
)
from readproof.config import CommentSettings
from readproof.domain.repository import CommentRepository
from readproof.domain.service import CommentService
from readproof.domain.value import CommentSort
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_replies_nested_under_parents(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.save(make_comment(age_seconds=10))
        reply = await comment_repo.save(make_comment(parent=parent))

        # Act
        response = await use_case.execute(ListCommentsRequest(thread_id="thread-1"))

        # Assert
        assert response.thread_id == "thread-1"
        assert response.total_count == 2
        assert len(response.comments) == 1
        assert response.comments[0].comment_id == str(parent.id)
        assert [r.comment_id for r in response.comments[0].replies] == [str(reply.id)]

    @pytest.mark.asyncio
    async def test_default_page_size_from_settings(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = ListCommentsUseCase(
            comment_service, CommentSettings(default_page_size=2)
        )
        for i in range(3):
            await comment_repo.save(make_comment(age_seconds=i))

        # Act
        response = await use_case.execute(
            ListCommentsRequest(thread_id="thread-1", sort_by=CommentSort.RECENT)
        )

        # Assert
        assert len(response.comments) == 2
        assert response.total_count == 3

    @pytest.mark.asyncio
    async def test_deleted_comment_shown_as_placeholder(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.save(make_comment())
        await comment_repo.save(make_comment(parent=parent))
        await comment_repo.mark_deleted(parent.id)

        response = await use_case.execute(ListCommentsRequest(thread_id="thread-1"))

        assert response.comments[0].is_deleted is True
        assert response.comments[0].content == "[deleted]"
        assert len(response.comments[0].replies) == 1
