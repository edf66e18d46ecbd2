"""Domain model entities for readproof."""

from readproof.domain.model.comment import DELETED_CONTENT, Comment
from readproof.domain.model.read_receipt import ReadReceipt
from readproof.domain.model.vote import Vote

__all__ = [
    "Comment",
    "DELETED_CONTENT",
    "ReadReceipt",
    "Vote",
]
