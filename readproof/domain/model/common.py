"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen; state transitions produce a new instance through
    ``evolve`` so field validation still runs on the changed values.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a validated copy with the given fields replaced."""
        return self.model_validate({**self.model_dump(), **changes})
