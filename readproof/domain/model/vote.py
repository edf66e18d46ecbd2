"""Vote entity.

Each identity can hold at most one vote per comment, either up or down.
"""

from datetime import datetime

from pydantic import Field

from readproof.domain.model.common import DomainModel
from readproof.domain.value import CommentId, Identity, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per comment (enforced by the storage unique constraint)
    - Switching up/down mutates the existing vote in place
    - Retracting deletes the vote; hard-deleting the comment deletes all its votes
    """

    id: VoteId
    comment_id: CommentId
    voter: Identity
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
