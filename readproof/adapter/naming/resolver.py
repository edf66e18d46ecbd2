"""Display name resolvers.

Names are looked up by lowercase address. Lookups against a chain name
service are out of scope; production serves names from configuration.
"""

import asyncio
from typing import Mapping

import logfire

from readproof.adapter.error import NameLookupError
from readproof.domain.service.naming_service import NameResolver
from readproof.domain.value import Identity


class StaticNameResolver(NameResolver):
    """Resolve display names from a fixed address -> name mapping."""

    def __init__(self, names: Mapping[str, str] | None = None) -> None:
        """Initialize static resolver.

        Args:
            names: Display names keyed by address (any case)
        """
        self.names = {address.lower(): name for address, name in (names or {}).items()}
        logfire.info("Static name resolver configured", count=len(self.names))

    async def lookup(self, identity: Identity) -> str | None:
        return self.names.get(identity.root)


class MockNameResolver(NameResolver):
    """Mock resolver for testing.

    Serves deterministic names and can be told to stall or fail, so callers'
    timeout and fallback handling can be exercised without any network.
    """

    def __init__(
        self,
        names: Mapping[str, str] | None = None,
        delay_seconds: float = 0.0,
        fail: bool = False,
    ) -> None:
        self.names = {address.lower(): name for address, name in (names or {}).items()}
        self.delay_seconds = delay_seconds
        self.fail = fail
        self.calls: list[str] = []

    async def lookup(self, identity: Identity) -> str | None:
        self.calls.append(identity.root)
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.fail:
            raise NameLookupError(f"Name lookup failed for {identity.root}")
        return self.names.get(identity.root)
