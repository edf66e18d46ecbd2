"""Domain layer errors.

Every error carries a stable ``code`` so the interface layer can translate it
into a caller-facing result without string matching on messages.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes exposed to callers."""

    VALIDATION_FAILED = "validation_failed"
    CONTENT_EMPTY = "content_empty"
    CONTENT_TOO_LONG = "content_too_long"
    CONTENT_RESERVED = "content_reserved"
    INVALID_SIGNATURE = "invalid_signature"
    NOT_OWNER = "not_owner"
    TIMESTAMP_MISSING = "timestamp_missing"
    TIMESTAMP_STALE = "timestamp_stale"
    TIMESTAMP_MALFORMED = "timestamp_malformed"
    PAYLOAD_MISMATCH = "payload_mismatch"
    COMMENT_NOT_FOUND = "comment_not_found"
    PARENT_NOT_FOUND = "parent_not_found"
    VOTE_NOT_FOUND = "vote_not_found"
    READ_RECEIPT_NOT_FOUND = "read_receipt_not_found"
    DUPLICATE_VOTE = "duplicate_vote"
    PARENT_TOO_DEEP = "parent_too_deep"
    PARENT_THREAD_MISMATCH = "parent_thread_mismatch"
    ALREADY_DELETED = "already_deleted"
    INTERNAL_ERROR = "internal_error"
    TIMEOUT = "timeout"


class DomainError(Exception):
    """Base domain error."""

    kind = "domain_error"
    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: ErrorCode | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)


class ValidationError(DomainError):
    """Malformed or missing input.

    Raised before any storage access. ``violations`` lists every problem
    found, not only the first one.
    """

    kind = "validation_error"
    default_code = ErrorCode.VALIDATION_FAILED

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        violations: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message, code)
        self.violations = violations or []


class AuthenticationError(DomainError):
    """Signature does not recover to the claimed identity."""

    kind = "authentication_error"
    default_code = ErrorCode.INVALID_SIGNATURE


class AuthorizationError(DomainError):
    """Valid identity that is not permitted to act on the target."""

    kind = "authorization_error"
    default_code = ErrorCode.NOT_OWNER

    def __init__(self, resource: str, resource_id: str, identity: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"{identity} is not authorized to modify {resource} {resource_id}"
        )


class ReplayError(DomainError):
    """Stale or missing timestamp, or a signed payload for another target."""

    kind = "replay_error"
    default_code = ErrorCode.PAYLOAD_MISMATCH


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = "not_found"
    default_code = ErrorCode.COMMENT_NOT_FOUND

    def __init__(self, resource: str, identifier: str, code: ErrorCode | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}", code)


class ConflictError(DomainError):
    """Duplicate vote, nesting-depth violation or already-deleted target."""

    kind = "conflict"
    default_code = ErrorCode.DUPLICATE_VOTE


class InternalError(DomainError):
    """Storage failure or unexpected state. Callers may retry the signed action."""

    kind = "internal_error"
    default_code = ErrorCode.INTERNAL_ERROR
