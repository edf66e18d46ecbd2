"""Read receipt projections returned to callers."""

from datetime import datetime

from pydantic import BaseModel

from readproof.domain.model import ReadReceipt


class ReadReceiptView(BaseModel):
    """A reader's signed attestation."""

    thread_id: str
    identity: str
    display_name: str | None
    signature: str
    signed_at: datetime

    @classmethod
    def from_receipt(cls, receipt: ReadReceipt) -> "ReadReceiptView":
        return cls(
            thread_id=receipt.thread_id,
            identity=receipt.reader.root,
            display_name=receipt.display_name,
            signature=receipt.signature,
            signed_at=receipt.signed_at,
        )
