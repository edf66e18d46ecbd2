"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from readproof.domain.model import Comment
from readproof.domain.value import CommentId, Identity, ThreadId
from tests.signing import ALICE

# Spans and events stay local during tests
logfire.configure(send_to_logfire=False, console=False)

FAKE_SIGNATURE = "0x" + "00" * 65
FAKE_HASH = "0x" + "00" * 32


def make_comment(
    thread_id: str = "thread-1",
    author: str = ALICE.address,
    content: str = "Test comment",
    parent: Comment | None = None,
    score: int = 0,
    age_seconds: int = 0,
    **changes,
) -> Comment:
    """Helper to build a stored comment without going through the service.

    Args:
        thread_id: Thread the comment belongs to
        author: Author address
        content: Comment content
        parent: Parent comment for replies
        score: Upvote count to start from (score equals upvotes)
        age_seconds: How long ago the comment was created
        **changes: Any other field override
    """
    fields = {
        "id": CommentId(uuid4()),
        "thread_id": ThreadId(thread_id),
        "author": Identity(author),
        "content": content,
        "parent_id": parent.id if parent else None,
        "depth": 1 if parent else 0,
        "upvote_count": score,
        "score": score,
        "signature": FAKE_SIGNATURE,
        "message_hash": FAKE_HASH,
        "created_at": datetime.now() - timedelta(seconds=age_seconds),
    }
    fields.update(changes)
    return Comment(**fields)
