"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .read_receipt import InMemoryReadReceiptRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryReadReceiptRepository",
    "InMemoryVoteRepository",
]
