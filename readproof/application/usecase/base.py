"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field

from readproof.domain.value import Identity

ADDRESS_PATTERN = r"^0x[0-9a-fA-F]{40}$"
SIGNATURE_PATTERN = r"^0x[0-9a-fA-F]{130}$"


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class SignedRequest(BaseModel):
    """Fields every signed action carries.

    The message is the exact text the wallet signed; the structured fields
    alongside it are cross-checked against it before anything is stored.
    """

    identity: str = Field(pattern=ADDRESS_PATTERN)  # Claimed signer address
    signature: str = Field(pattern=SIGNATURE_PATTERN)  # 65-byte hex signature
    message: str = Field(min_length=1)

    @property
    def claimed_identity(self) -> Identity:
        return Identity(self.identity)
