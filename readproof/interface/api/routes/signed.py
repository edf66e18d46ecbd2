"""Request body fields shared by signed-action routes."""

from pydantic import BaseModel


class SignedAPIRequest(BaseModel):
    """API request carrying a wallet signature over an action message.

    Shapes are checked when the use case request is built, so every
    violation is reported together.
    """

    identity: str
    signature: str
    message: str
