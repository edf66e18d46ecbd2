"""Domain services."""

from .base import Service
from .comment_service import CommentPage, CommentService, CommentThread
from .message_protocol import MessageProtocol
from .naming_service import NameResolver, NamingService
from .read_receipt_service import ReaderPage, ReadReceiptService
from .signature_service import SignatureService
from .signed_action_service import SignedActionService
from .vote_service import VoteService

__all__ = [
    "CommentPage",
    "CommentService",
    "CommentThread",
    "MessageProtocol",
    "NameResolver",
    "NamingService",
    "ReaderPage",
    "ReadReceiptService",
    "Service",
    "SignatureService",
    "SignedActionService",
    "VoteService",
]
