"""Signed action domain service."""

from typing import Any, Mapping

import logfire

from readproof.domain.error import AuthenticationError, ErrorCode, ReplayError
from readproof.domain.value import ActionType, Identity

from .base import Service
from .message_protocol import MessageProtocol
from .signature_service import SignatureService

_FRESHNESS_MESSAGES = {
    ErrorCode.TIMESTAMP_MISSING.value: "Timestamp not found in message",
    ErrorCode.TIMESTAMP_MALFORMED.value: "Invalid timestamp format",
    ErrorCode.TIMESTAMP_STALE.value: "Timestamp too old or invalid",
}


class SignedActionService(Service):
    """Authenticates a signed action before any storage is touched.

    The checks run cheapest first: timestamp freshness, then the cross-check
    of embedded target ids, then signer recovery.
    """

    def __init__(
        self,
        signature_service: SignatureService,
        message_protocol: MessageProtocol,
    ) -> None:
        """Initialize signed action service.

        Args:
            signature_service: Signer recovery and freshness checks
            message_protocol: Message template cross-checks
        """
        self.signature_service = signature_service
        self.message_protocol = message_protocol

    def authenticate(
        self,
        action: ActionType,
        message: str,
        signature: str,
        identity: Identity,
        expected: Mapping[str, Any],
    ) -> int:
        """Authenticate a signed action.

        Args:
            action: Action being authorized
            message: Exact signed message text
            signature: 0x-prefixed hex signature
            identity: Identity claimed by the caller
            expected: Structured request fields the message must embed

        Returns:
            The message timestamp in milliseconds

        Raises:
            ReplayError: If the timestamp is missing, malformed or stale, or
                the message embeds different targets than the request
            AuthenticationError: If the signature wasn't made by identity
        """
        with logfire.span(
            "signed_action_service.authenticate",
            action=action.value,
            identity=identity.root,
        ):
            freshness = self.signature_service.check_freshness(message)
            if not freshness.valid:
                code = ErrorCode(freshness.error)
                logfire.warn(
                    "Signed message rejected",
                    action=action.value,
                    identity=identity.root,
                    reason=code.value,
                )
                raise ReplayError(_FRESHNESS_MESSAGES[code.value], code)

            self.message_protocol.check(action, message, expected)

            if not self.signature_service.verify(message, signature, identity):
                raise AuthenticationError("Invalid signature")

            logfire.info(
                "Signed action authenticated",
                action=action.value,
                identity=identity.root,
            )
            return freshness.timestamp  # type: ignore[return-value]
