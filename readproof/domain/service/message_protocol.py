"""Action message protocol.

Each signed action has a fixed text template that binds its parameters into
the signed payload. The client signs the rendered text and sends it alongside
the structured request; the server never rebuilds the text, it extracts the
embedded fields and cross-checks them against the request so a signature for
one target cannot be replayed against another.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping
from uuid import UUID

import logfire

from readproof.domain.error import ErrorCode, ReplayError
from readproof.domain.value import ActionType, VoteType

from .base import Service
from .signature_service import TIMESTAMP_MARKER

NO_PARENT = "none"


class FieldKind(Enum):
    THREAD_ID = "thread_id"
    COMMENT_ID = "comment_id"
    PARENT_ID = "parent_id"
    CONTENT = "content"
    VOTE_TYPE = "vote_type"
    TITLE = "title"


# Payload fields only take part in the cross-check in strict mode
PAYLOAD_KINDS = {FieldKind.CONTENT, FieldKind.VOTE_TYPE}


@dataclass(frozen=True)
class MessageField:
    name: str
    label: str
    kind: FieldKind


@dataclass(frozen=True)
class MessageTemplate:
    template: str
    fields: tuple[MessageField, ...]

    def field(self, name: str) -> MessageField | None:
        return next((f for f in self.fields if f.name == name), None)


TEMPLATES: dict[ActionType, MessageTemplate] = {
    ActionType.SIGN_READ: MessageTemplate(
        "I have read: {title}\nBlog ID: {thread_id}\nTimestamp: {timestamp}",
        (
            MessageField("title", "I have read:", FieldKind.TITLE),
            MessageField("thread_id", "Blog ID:", FieldKind.THREAD_ID),
        ),
    ),
    ActionType.POST_COMMENT: MessageTemplate(
        "I want to comment on: {title}\nBlog ID: {thread_id}\n"
        "Parent Comment: {parent_id}\nContent: {content}\nTimestamp: {timestamp}",
        (
            MessageField("title", "I want to comment on:", FieldKind.TITLE),
            MessageField("thread_id", "Blog ID:", FieldKind.THREAD_ID),
            MessageField("parent_id", "Parent Comment:", FieldKind.PARENT_ID),
            MessageField("content", "Content:", FieldKind.CONTENT),
        ),
    ),
    ActionType.EDIT_COMMENT: MessageTemplate(
        "Edit comment: {comment_id}\nNew content: {content}\nTimestamp: {timestamp}",
        (
            MessageField("comment_id", "Edit comment:", FieldKind.COMMENT_ID),
            MessageField("content", "New content:", FieldKind.CONTENT),
        ),
    ),
    ActionType.DELETE_COMMENT: MessageTemplate(
        "Delete comment: {comment_id}\nTimestamp: {timestamp}",
        (MessageField("comment_id", "Delete comment:", FieldKind.COMMENT_ID),),
    ),
    ActionType.VOTE: MessageTemplate(
        "Vote on comment: {comment_id}\nVote type: {vote_type}\nTimestamp: {timestamp}",
        (
            MessageField("comment_id", "Vote on comment:", FieldKind.COMMENT_ID),
            MessageField("vote_type", "Vote type:", FieldKind.VOTE_TYPE),
        ),
    ),
    ActionType.UNVOTE: MessageTemplate(
        "Remove vote on comment: {comment_id}\nTimestamp: {timestamp}",
        (MessageField("comment_id", "Remove vote on comment:", FieldKind.COMMENT_ID),),
    ),
}


def build_message(action: ActionType, timestamp_ms: int, **fields: Any) -> str:
    """Render the text a client signs for an action.

    Args:
        action: Action type
        timestamp_ms: Milliseconds since epoch to embed
        **fields: Template fields (thread_id, comment_id, parent_id, content,
            vote_type, title)

    Returns:
        Message text ready to be signed
    """
    values: dict[str, Any] = {"title": "", **fields, "timestamp": timestamp_ms}
    if "parent_id" in values or action is ActionType.POST_COMMENT:
        parent = values.get("parent_id")
        values["parent_id"] = str(parent) if parent else NO_PARENT
    if isinstance(values.get("vote_type"), VoteType):
        values["vote_type"] = values["vote_type"].value
    if isinstance(values.get("content"), str):
        values["content"] = values["content"].strip()
    return TEMPLATES[action].template.format(**values)


def _extract_line(message: str, label: str) -> str | None:
    match = re.search(rf"^{re.escape(label)}[ \t]*(.*)$", message, re.MULTILINE)
    return match.group(1).strip() if match else None


def _extract_block(message: str, label: str) -> str | None:
    """Extract a possibly multi-line value running up to the final timestamp line."""
    match = re.search(rf"^{re.escape(label)}[ \t]?", message, re.MULTILINE)
    if not match:
        return None
    end = message.rfind("\n" + TIMESTAMP_MARKER)
    if end < match.end():
        return None
    return message[match.end() : end]


def _as_uuid(value: Any) -> UUID | None:
    try:
        return value if isinstance(value, UUID) else UUID(str(value).strip())
    except ValueError:
        return None


def _field_matches(kind: FieldKind, extracted: str | None, expected: Any) -> bool:
    if kind is FieldKind.PARENT_ID:
        if expected is None:
            return extracted is not None and extracted.lower() == NO_PARENT
        return _field_matches(FieldKind.COMMENT_ID, extracted, expected)

    if extracted is None:
        return False

    if kind is FieldKind.COMMENT_ID:
        extracted_id = _as_uuid(extracted)
        return extracted_id is not None and extracted_id == _as_uuid(expected)
    if kind is FieldKind.VOTE_TYPE:
        expected_value = expected.value if isinstance(expected, VoteType) else expected
        return extracted.strip() == str(expected_value)
    return extracted.strip() == str(expected).strip()


class MessageProtocol(Service):
    """Domain service that cross-checks signed messages against requests."""

    def __init__(self, strict_payload: bool = True) -> None:
        """Initialize message protocol.

        Args:
            strict_payload: Also require content and vote type in the message
                to equal the request, not only the target ids
        """
        self.strict_payload = strict_payload

    def extract_fields(self, action: ActionType, message: str) -> dict[str, str]:
        """Extract the labeled fields of an action's template from a message.

        Fields whose label is absent are left out of the result.
        """
        extracted: dict[str, str] = {}
        for field in TEMPLATES[action].fields:
            if field.kind is FieldKind.CONTENT:
                value = _extract_block(message, field.label)
            else:
                value = _extract_line(message, field.label)
            if value is not None:
                extracted[field.name] = value
        return extracted

    def check(
        self, action: ActionType, message: str, expected: Mapping[str, Any]
    ) -> None:
        """Require the message's embedded fields to match the structured request.

        Args:
            action: Action the message is supposed to authorize
            message: Signed message text
            expected: Request values keyed by template field name

        Raises:
            ReplayError: If any checked field is missing from the message or
                differs from the request
        """
        template = TEMPLATES[action]
        extracted = self.extract_fields(action, message)

        mismatched = []
        for name, value in expected.items():
            field = template.field(name)
            if field is None or field.kind is FieldKind.TITLE:
                continue
            if field.kind in PAYLOAD_KINDS and not self.strict_payload:
                continue
            if not _field_matches(field.kind, extracted.get(name), value):
                mismatched.append(name)

        if mismatched:
            logfire.warn(
                "Signed message does not match request",
                action=action.value,
                fields=mismatched,
            )
            raise ReplayError(
                f"Signed message does not match request: {', '.join(mismatched)}",
                ErrorCode.PAYLOAD_MISMATCH,
            )
