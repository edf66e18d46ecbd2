"""Display name domain service."""

import asyncio

import logfire

from readproof.domain.value import Identity

from .base import Service


class NameResolver:
    """Generic interface for human-readable wallet name lookups.

    Implementations live in the adapter layer and are created once per
    process by the DI container.
    """

    async def lookup(self, identity: Identity) -> str | None:
        """Look up the display name for an identity.

        Args:
            identity: Wallet identity

        Returns:
            Display name, or None if the identity has none
        """
        raise NotImplementedError


class NamingService(Service):
    """Best-effort display name resolution.

    A name is decoration: a slow or failing resolver must never block a
    write, so every failure degrades to None.
    """

    def __init__(self, resolver: NameResolver, timeout_seconds: float = 2.0) -> None:
        """Initialize naming service.

        Args:
            resolver: Name resolver collaborator
            timeout_seconds: Maximum time to wait for a lookup
        """
        self.resolver = resolver
        self.timeout_seconds = timeout_seconds

    async def display_name(self, identity: Identity) -> str | None:
        """Resolve a display name, or None on absence, failure or timeout."""
        with logfire.span("naming_service.display_name", identity=identity.root):
            try:
                return await asyncio.wait_for(
                    self.resolver.lookup(identity), timeout=self.timeout_seconds
                )
            except asyncio.TimeoutError:
                logfire.warn(
                    "Display name lookup timed out",
                    identity=identity.root,
                    timeout_seconds=self.timeout_seconds,
                )
            except Exception as e:
                logfire.warn(
                    "Display name lookup failed",
                    identity=identity.root,
                    error=str(e),
                )
            return None
