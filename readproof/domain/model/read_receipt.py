"""Read receipt entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from readproof.domain.model.common import DomainModel
from readproof.domain.value import Identity, ReadReceiptId, ThreadId


class ReadReceipt(DomainModel):
    """A reader's signed attestation that they read a thread's article.

    One receipt per (reader, thread). Signing again refreshes the signature,
    message hash and signed_at of the existing receipt.
    """

    id: ReadReceiptId
    thread_id: ThreadId
    reader: Identity
    display_name: Optional[str] = None
    signature: str
    message_hash: str
    signed_at: datetime = Field(default_factory=datetime.now)
