"""PostgreSQL repository implementations."""

from readproof.persistence.repository.comment import PostgresCommentRepository
from readproof.persistence.repository.read_receipt import PostgresReadReceiptRepository
from readproof.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresReadReceiptRepository",
    "PostgresVoteRepository",
]
