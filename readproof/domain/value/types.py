"""Domain value objects for readproof.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from datetime import datetime
from enum import Enum

from pydantic import field_validator, model_validator

from readproof.domain.value.common import RootValueObject, ValueObject

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


class Identity(RootValueObject[str]):
    """Wallet address acting as the author/voter/reader identity.

    Always stored lowercase so ownership and vote uniqueness compare
    case-insensitively. Format: 0x followed by 40 hex characters.
    """

    @field_validator("root")
    @classmethod
    def validate_address(cls, v: str) -> str:
        """Validate address shape and normalize to lowercase."""
        v = v.strip()
        if not ADDRESS_PATTERN.match(v):
            raise ValueError("Identity must be a 0x-prefixed 40 hex character address")
        return v.lower()

    def matches(self, other: "Identity | str") -> bool:
        """Case-insensitive comparison against another identity or raw address."""
        other_value = other.root if isinstance(other, Identity) else other
        return self.root == other_value.lower()


class VoteType(str, Enum):
    """Type of vote.

    Values are the wire format signed by clients ("Vote type: upvote").
    """

    UP = "upvote"
    DOWN = "downvote"

    @property
    def opposite(self) -> "VoteType":
        return VoteType.DOWN if self is VoteType.UP else VoteType.UP


class CommentSort(str, Enum):
    """Ordering of top-level comments in a thread listing."""

    SCORE = "score"
    RECENT = "recent"


class DeletionType(str, Enum):
    """Outcome of deleting a comment."""

    SOFT = "soft"
    HARD = "hard"


class ActionType(str, Enum):
    """Signed actions understood by the message protocol."""

    SIGN_READ = "sign_read"
    POST_COMMENT = "post_comment"
    EDIT_COMMENT = "edit_comment"
    DELETE_COMMENT = "delete_comment"
    VOTE = "vote"
    UNVOTE = "unvote"


class FreshnessResult(ValueObject):
    """Outcome of checking the timestamp embedded in a signed message."""

    valid: bool
    timestamp: int | None = None  # Milliseconds since epoch
    error: str | None = None  # ErrorCode value when invalid

    @model_validator(mode="after")
    def require_timestamp_when_valid(self) -> "FreshnessResult":
        if self.valid and self.timestamp is None:
            raise ValueError("A fresh message must carry its timestamp")
        return self


class VoteTally(ValueObject):
    """Counters of a comment after a vote mutation."""

    score: int
    upvote_count: int = 0
    downvote_count: int = 0
    user_vote: VoteType | None = None


class BadgeRecord(ValueObject):
    """Signed-read record handed to the badge generator.

    Thread title and date are not stored; the caller supplies them and they
    pass through unchanged.
    """

    thread_id: str
    identity: Identity
    display_name: str | None = None
    signed_at: datetime
    signature: str
    thread_title: str | None = None
    thread_date: str | None = None
