"""Signed message verification domain service.

Messages are signed by wallets with the EIP-191 ``personal_sign`` scheme.
The signer is recovered from (message, signature) and compared with the
identity the caller claims. Each message embeds a millisecond timestamp after
a ``Timestamp:`` marker, which bounds how long a captured signature stays
usable.
"""

import time
from typing import Callable

import logfire
from eth_account import Account
from eth_account.messages import defunct_hash_message, encode_defunct

from readproof.domain.error import ErrorCode
from readproof.domain.value import FreshnessResult, Identity

from .base import Service

TIMESTAMP_MARKER = "Timestamp:"
DEFAULT_FRESHNESS_WINDOW_MS = 5 * 60 * 1000
# Milliseconds since epoch stay at 13 digits for centuries
MAX_TIMESTAMP_DIGITS = 16


def current_time_ms() -> int:
    """Wall clock in milliseconds since epoch."""
    return time.time_ns() // 1_000_000


class SignatureService(Service):
    """Domain service for recovering and checking message signers."""

    def __init__(
        self,
        freshness_window_ms: int = DEFAULT_FRESHNESS_WINDOW_MS,
        clock: Callable[[], int] = current_time_ms,
    ) -> None:
        """Initialize signature service.

        Args:
            freshness_window_ms: Maximum distance between the message
                timestamp and the server clock
            clock: Source of the current time in milliseconds
        """
        self.freshness_window_ms = freshness_window_ms
        self.clock = clock

    def recover_signer(self, message: str, signature: bytes | str) -> str:
        """Recover the address that produced a personal-message signature.

        Raises:
            ValueError: If the signature is malformed or recovery fails
        """
        return Account.recover_message(encode_defunct(text=message), signature=signature)

    def verify(
        self, message: str, signature: bytes | str, claimed: Identity | str
    ) -> bool:
        """Check that the signature over message was made by the claimed identity.

        Never raises: malformed signatures and recovery failures return False.

        Args:
            message: Exact text the wallet signed
            signature: 65-byte signature as bytes or 0x-prefixed hex
            claimed: Identity the caller claims to be

        Returns:
            True if the recovered signer equals the claimed identity
        """
        claimed_address = claimed.root if isinstance(claimed, Identity) else claimed
        with logfire.span("signature_service.verify", claimed=claimed_address):
            try:
                recovered = self.recover_signer(message, signature)
            except Exception as e:
                logfire.warn(
                    "Signature recovery failed",
                    claimed=claimed_address,
                    error=str(e),
                )
                return False

            matches = recovered.lower() == claimed_address.lower()
            if not matches:
                logfire.warn(
                    "Signature signer mismatch",
                    claimed=claimed_address,
                    recovered=recovered.lower(),
                )
            return matches

    def check_freshness(self, message: str, now_ms: int | None = None) -> FreshnessResult:
        """Validate the timestamp embedded in a signed message.

        The last ``Timestamp:`` marker wins, so content placed earlier in the
        message cannot shadow the real timestamp line.

        Args:
            message: Signed message text
            now_ms: Current time override in milliseconds

        Returns:
            FreshnessResult with the parsed timestamp, or the error code
        """
        marker_at = message.rfind(TIMESTAMP_MARKER)
        if marker_at < 0:
            return FreshnessResult(valid=False, error=ErrorCode.TIMESTAMP_MISSING.value)

        raw = message[marker_at + len(TIMESTAMP_MARKER) :].split("\n", 1)[0].strip()
        if (
            not raw.isascii()
            or not raw.isdigit()
            or len(raw) > MAX_TIMESTAMP_DIGITS
        ):
            return FreshnessResult(
                valid=False, error=ErrorCode.TIMESTAMP_MALFORMED.value
            )

        timestamp = int(raw)
        now = self.clock() if now_ms is None else now_ms
        if abs(now - timestamp) > self.freshness_window_ms:
            return FreshnessResult(
                valid=False, timestamp=timestamp, error=ErrorCode.TIMESTAMP_STALE.value
            )

        return FreshnessResult(valid=True, timestamp=timestamp)

    @staticmethod
    def hash_message(message: str) -> str:
        """EIP-191 hash of the message, kept with the record for audit."""
        return "0x" + bytes(defunct_hash_message(text=message)).hex()
