"""List comments use case."""

from pydantic import BaseModel, Field

from readproof.application.usecase.base import BaseUseCase
from readproof.config import CommentSettings
from readproof.domain.service import CommentService
from readproof.domain.value import CommentSort, ThreadId

from .views import CommentView


class ListCommentsRequest(BaseModel):
    """List comments request."""

    thread_id: str = Field(min_length=1, max_length=255)
    sort_by: CommentSort = CommentSort.SCORE
    limit: int | None = Field(default=None, ge=1)  # Defaults from settings
    offset: int = Field(default=0, ge=0)


class ListCommentsResponse(BaseModel):
    """List comments response."""

    thread_id: str
    total_count: int  # Every comment in the thread, replies included
    comments: list[CommentView]


class ListCommentsUseCase(BaseUseCase):
    """Use case for reading a thread's two-level discussion."""

    def __init__(
        self,
        comment_service: CommentService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            comment_settings: Page size defaults
        """
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Top-level comments are paged and sorted as requested; each carries all
        of its replies, oldest first.
        """
        page = await self.comment_service.list_comments(
            thread_id=ThreadId(request.thread_id),
            sort=request.sort_by,
            limit=request.limit or self.comment_settings.default_page_size,
            offset=request.offset,
        )

        return ListCommentsResponse(
            thread_id=page.thread_id,
            total_count=page.total_count,
            comments=[
                CommentView.from_comment(thread.comment, thread.replies)
                for thread in page.threads
            ],
        )
