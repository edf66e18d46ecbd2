"""Strongly typed identifiers for readproof domain entities.

Using NewType prevents mixing up different entity IDs and keeps
signatures self-documenting.
"""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
ReadReceiptId = NewType("ReadReceiptId", UUID)

# Threads are external articles, identified by whatever id the content source uses
ThreadId = NewType("ThreadId", str)
