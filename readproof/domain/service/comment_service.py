"""Comment domain service."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

import logfire

from readproof.domain.error import (
    AuthorizationError,
    ConflictError,
    ErrorCode,
    InternalError,
    NotFoundError,
    ValidationError,
)
from readproof.domain.model.comment import (
    DELETED_CONTENT,
    MAX_CONTENT_LENGTH,
    Comment,
)
from readproof.domain.repository import CommentRepository, VoteRepository
from readproof.domain.value import (
    CommentId,
    CommentSort,
    DeletionType,
    Identity,
    ThreadId,
)

from .base import Service

MARKUP_TAG = re.compile(r"<[^>]*>")


def sanitize_content(content: str) -> str:
    """Strip every markup tag and surrounding whitespace."""
    return MARKUP_TAG.sub("", content).strip()


@dataclass
class CommentThread:
    """A top-level comment together with its replies, oldest reply first."""

    comment: Comment
    replies: list[Comment] = field(default_factory=list)


@dataclass
class CommentPage:
    """One page of a thread's discussion."""

    thread_id: ThreadId
    total_count: int
    threads: list[CommentThread]


class CommentService(Service):
    """Domain service for comment lifecycle operations.

    Lifecycle: active -> edited (repeatable) -> soft-deleted, or
    active/edited -> removed entirely when deleted without replies.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        max_page_size: int = 100,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            vote_repository: Vote repository, for removing votes on hard delete
            max_page_size: Upper bound for top-level comments per page
        """
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository
        self.max_page_size = max_page_size

    @staticmethod
    def _sanitize_or_raise(content: str) -> str:
        sanitized = sanitize_content(content)
        if not sanitized:
            raise ValidationError(
                "Comment content cannot be empty",
                ErrorCode.CONTENT_EMPTY,
                violations=[{"field": "content", "message": "empty after sanitization"}],
            )
        if len(sanitized) > MAX_CONTENT_LENGTH:
            raise ValidationError(
                f"Comment content exceeds {MAX_CONTENT_LENGTH} characters",
                ErrorCode.CONTENT_TOO_LONG,
                violations=[
                    {
                        "field": "content",
                        "message": f"longer than {MAX_CONTENT_LENGTH} characters",
                    }
                ],
            )
        # Only soft-delete may write the tombstone
        if sanitized == DELETED_CONTENT:
            raise ValidationError(
                "Comment content is reserved",
                ErrorCode.CONTENT_RESERVED,
                violations=[{"field": "content", "message": "reserved value"}],
            )
        return sanitized

    async def create_comment(
        self,
        thread_id: ThreadId,
        author: Identity,
        content: str,
        signature: str,
        message_hash: str,
        parent_id: CommentId | None = None,
        author_display_name: str | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply to a top-level comment.

        Args:
            thread_id: Thread ID
            author: Author identity
            content: Raw comment content (markup is stripped)
            signature: Signature that authorized the comment
            message_hash: Hash of the signed message
            parent_id: Parent comment ID for replies (None for top-level)
            author_display_name: Best-effort display name of the author

        Returns:
            Created comment

        Raises:
            ValidationError: If sanitized content is empty, too long or reserved
            NotFoundError: If the parent comment doesn't exist
            ConflictError: If the parent is itself a reply or on another thread
        """
        with logfire.span(
            "comment_service.create_comment",
            thread_id=thread_id,
            author=author.root,
            parent_id=str(parent_id) if parent_id else None,
        ):
            sanitized = self._sanitize_or_raise(content)

            depth = 0
            if parent_id:
                # Locked so the parent can't be hard-deleted while the reply lands
                parent = await self.comment_repository.find_by_id_for_update(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        thread_id=thread_id,
                    )
                    raise NotFoundError(
                        "Parent comment", str(parent_id), ErrorCode.PARENT_NOT_FOUND
                    )
                if parent.depth != 0:
                    logfire.warn(
                        "Reply to a reply rejected",
                        parent_id=str(parent_id),
                        parent_depth=parent.depth,
                    )
                    raise ConflictError(
                        "Cannot reply to a reply (max 2 levels)",
                        ErrorCode.PARENT_TOO_DEEP,
                    )
                if parent.thread_id != thread_id:
                    logfire.warn(
                        "Parent comment does not belong to thread",
                        parent_id=str(parent_id),
                        parent_thread_id=parent.thread_id,
                        target_thread_id=thread_id,
                    )
                    raise ConflictError(
                        "Parent comment does not belong to this thread",
                        ErrorCode.PARENT_THREAD_MISMATCH,
                    )
                depth = 1

            comment = Comment(
                id=CommentId(uuid4()),
                thread_id=thread_id,
                author=author,
                author_display_name=author_display_name,
                content=sanitized,
                parent_id=parent_id,
                depth=depth,
                signature=signature,
                message_hash=message_hash,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                thread_id=thread_id,
                author=author.root,
                depth=depth,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def _get_owned(
        self, comment_id: CommentId, requester: Identity, for_update: bool = False
    ) -> Comment:
        if for_update:
            comment = await self.comment_repository.find_by_id_for_update(comment_id)
        else:
            comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id), ErrorCode.COMMENT_NOT_FOUND)
        if not comment.author.matches(requester):
            logfire.warn(
                "Comment ownership check failed",
                comment_id=str(comment_id),
                requester=requester.root,
            )
            raise AuthorizationError("comment", str(comment_id), requester.root)
        return comment

    async def edit_comment(
        self, comment_id: CommentId, requester: Identity, content: str
    ) -> Comment:
        """Replace the content of the requester's own comment.

        Editing with identical content is allowed and still advances edited_at.

        Raises:
            ValidationError: If sanitized content is empty, too long or reserved
            NotFoundError: If the comment doesn't exist
            AuthorizationError: If requester isn't the author
            ConflictError: If the comment was soft-deleted
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            requester=requester.root,
        ):
            sanitized = self._sanitize_or_raise(content)
            comment = await self._get_owned(comment_id, requester)
            if comment.is_deleted:
                logfire.warn("Attempt to edit deleted comment", comment_id=str(comment_id))
                raise ConflictError(
                    "Cannot edit deleted comment", ErrorCode.ALREADY_DELETED
                )

            updated = await self.comment_repository.update_content(
                comment_id, sanitized, datetime.now()
            )
            if updated is None:
                # Deleted between the read and the update
                raise ConflictError(
                    "Cannot edit deleted comment", ErrorCode.ALREADY_DELETED
                )

            logfire.info(
                "Comment edited",
                comment_id=str(comment_id),
                content_length=len(updated.content),
            )
            return updated

    async def delete_comment(
        self, comment_id: CommentId, requester: Identity
    ) -> DeletionType:
        """Delete the requester's own comment.

        A comment that still has replies is soft-deleted so the replies keep
        their parent; otherwise the comment and every vote on it are removed.

        Raises:
            NotFoundError: If the comment doesn't exist
            AuthorizationError: If requester isn't the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester=requester.root,
        ):
            await self._get_owned(comment_id, requester, for_update=True)

            if await self.comment_repository.has_replies(comment_id):
                updated = await self.comment_repository.mark_deleted(comment_id)
                if updated is None:
                    raise InternalError(f"Comment vanished while locked: {comment_id}")
                logfire.info("Comment soft-deleted", comment_id=str(comment_id))
                return DeletionType.SOFT

            removed_votes = await self.vote_repository.delete_by_comment(comment_id)
            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment hard-deleted",
                comment_id=str(comment_id),
                removed_votes=removed_votes,
            )
            return DeletionType.HARD

    async def list_comments(
        self,
        thread_id: ThreadId,
        sort: CommentSort = CommentSort.SCORE,
        limit: int = 50,
        offset: int = 0,
    ) -> CommentPage:
        """Get a page of top-level comments with their replies.

        Args:
            thread_id: Thread ID
            sort: Ordering of top-level comments; replies are always oldest first
            limit: Requested page size, clamped to max_page_size
            offset: Number of top-level comments to skip

        Returns:
            Page with the thread's total comment count
        """
        limit = max(1, min(limit, self.max_page_size))
        offset = max(0, offset)
        with logfire.span(
            "comment_service.list_comments",
            thread_id=thread_id,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            top_level = await self.comment_repository.find_top_level(
                thread_id, sort, limit, offset
            )
            replies = await self.comment_repository.find_replies(
                [comment.id for comment in top_level]
            )
            total = await self.comment_repository.count_by_thread(thread_id)

            by_parent: dict[CommentId, list[Comment]] = {}
            for reply in replies:
                if reply.parent_id is not None:
                    by_parent.setdefault(reply.parent_id, []).append(reply)

            threads = [
                CommentThread(comment=comment, replies=by_parent.get(comment.id, []))
                for comment in top_level
            ]
            logfire.info(
                "Comments retrieved for thread",
                thread_id=thread_id,
                count=len(threads),
                total=total,
            )
            return CommentPage(thread_id=thread_id, total_count=total, threads=threads)
