"""Domain value objects for readproof."""

from readproof.domain.value.identifiers import (
    CommentId,
    ReadReceiptId,
    ThreadId,
    VoteId,
)
from readproof.domain.value.types import (
    ActionType,
    BadgeRecord,
    CommentSort,
    DeletionType,
    FreshnessResult,
    Identity,
    VoteTally,
    VoteType,
)

__all__ = [
    # Identifiers
    "CommentId",
    "ReadReceiptId",
    "ThreadId",
    "VoteId",
    # Types
    "ActionType",
    "BadgeRecord",
    "CommentSort",
    "DeletionType",
    "FreshnessResult",
    "Identity",
    "VoteTally",
    "VoteType",
]
