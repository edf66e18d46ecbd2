"""Display name adapter."""

from .resolver import (
    MockNameResolver,
    StaticNameResolver,
)

__all__ = ["MockNameResolver", "StaticNameResolver"]
