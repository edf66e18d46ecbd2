"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from readproof.application.usecase.comment import (
    CommentView,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    PostCommentRequest,
    PostCommentUseCase,
)
from readproof.domain.value import CommentSort

from .signed import SignedAPIRequest

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class PostCommentAPIRequest(SignedAPIRequest):
    """API request for posting a comment."""

    thread_id: str
    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class EditCommentAPIRequest(SignedAPIRequest):
    """API request for editing a comment."""

    content: str


@router.post(
    "/comments",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def post_comment(
    request: PostCommentAPIRequest,
    post_comment_use_case: FromDishka[PostCommentUseCase],
) -> CommentView:
    """Post a top-level comment on a thread or reply to a top-level comment.

    The message must be the signed "I want to comment on" text naming the
    same thread, parent and content.
    """
    use_case_request = PostCommentRequest(
        thread_id=request.thread_id,
        content=request.content,
        parent_id=request.parent_id,
        identity=request.identity,
        signature=request.signature,
        message=request.message,
    )
    return await post_comment_use_case.execute(use_case_request)


@router.patch("/comments/{comment_id}", response_model=CommentView)
async def edit_comment(
    comment_id: str,
    request: EditCommentAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
) -> CommentView:
    """Edit a comment's content. Only the author can edit."""
    use_case_request = EditCommentRequest(
        comment_id=comment_id,
        content=request.content,
        identity=request.identity,
        signature=request.signature,
        message=request.message,
    )
    return await edit_comment_use_case.execute(use_case_request)


async def _delete_comment(
    comment_id: str,
    request: SignedAPIRequest,
    delete_comment_use_case: DeleteCommentUseCase,
) -> DeleteCommentResponse:
    use_case_request = DeleteCommentRequest(
        comment_id=comment_id,
        identity=request.identity,
        signature=request.signature,
        message=request.message,
    )
    return await delete_comment_use_case.execute(use_case_request)


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    request: SignedAPIRequest,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Delete a comment. Only the author can delete.

    Comments with replies are soft-deleted; others are removed with their votes.
    """
    return await _delete_comment(comment_id, request, delete_comment_use_case)


@router.post("/comments/{comment_id}/delete", response_model=DeleteCommentResponse)
async def delete_comment_via_post(
    comment_id: str,
    request: SignedAPIRequest,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Delete a comment, for clients that can't send a body with DELETE."""
    return await _delete_comment(comment_id, request, delete_comment_use_case)


@router.get("/threads/{thread_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    thread_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    sort_by: CommentSort = CommentSort.SCORE,
    limit: int | None = None,
    offset: int = 0,
) -> ListCommentsResponse:
    """List a thread's top-level comments, each with its replies.

    Args:
        thread_id: Thread (article) ID
        sort_by: "score" (default) or "recent"
        limit: Top-level comments per page (default 50, max 100)
        offset: Top-level comments to skip
    """
    use_case_request = ListCommentsRequest(
        thread_id=thread_id,
        sort_by=sort_by,
        limit=limit,
        offset=offset,
    )
    return await list_comments_use_case.execute(use_case_request)
