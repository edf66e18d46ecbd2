"""Repository interfaces for the readproof domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from readproof.domain.repository.comment import CommentRepository
from readproof.domain.repository.read_receipt import ReadReceiptRepository
from readproof.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "ReadReceiptRepository",
    "VoteRepository",
]
