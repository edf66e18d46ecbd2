"""Wallets and signed messages for tests.

Keys are fixed so addresses are stable across runs. Never use them outside
tests.
"""

import time
from dataclasses import dataclass
from typing import Any

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount

from readproof.domain.service.message_protocol import build_message
from readproof.domain.value import ActionType

ALICE: LocalAccount = Account.from_key("0x" + "a1" * 32)
BOB: LocalAccount = Account.from_key("0x" + "b2" * 32)
MALLORY: LocalAccount = Account.from_key("0x" + "c3" * 32)

FIVE_MINUTES_MS = 5 * 60 * 1000


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def sign(account: LocalAccount, message: str) -> str:
    """Personal-sign a message, returning 0x-prefixed hex."""
    signed = account.sign_message(encode_defunct(text=message))
    return "0x" + bytes(signed.signature).hex()


@dataclass
class SignedAction:
    """Identity, signature and message for one signed request."""

    identity: str
    signature: str
    message: str

    def fields(self, **extra: Any) -> dict[str, Any]:
        """Request fields, merged with the structured action fields."""
        return {
            "identity": self.identity,
            "signature": self.signature,
            "message": self.message,
            **extra,
        }


def signed_action(
    account: LocalAccount,
    action: ActionType,
    timestamp_ms: int | None = None,
    identity: str | None = None,
    **fields: Any,
) -> SignedAction:
    """Build and sign the message for an action.

    Args:
        account: Wallet that signs
        action: Action whose template is rendered
        timestamp_ms: Embedded timestamp, now when omitted
        identity: Claimed identity, the signer's own address when omitted
        **fields: Template fields
    """
    message = build_message(
        action, now_ms() if timestamp_ms is None else timestamp_ms, **fields
    )
    return SignedAction(
        identity=identity or account.address,
        signature=sign(account, message),
        message=message,
    )
