"""Unit tests for NamingService."""

import pytest

from readproof.adapter.naming import MockNameResolver, StaticNameResolver
from readproof.domain.service import NamingService
from readproof.domain.value import Identity
from tests.signing import ALICE, BOB


class TestDisplayName:
    """Tests for best-effort name resolution."""

    @pytest.mark.asyncio
    async def test_known_identity_resolves(self):
        service = NamingService(StaticNameResolver({ALICE.address: "alice.eth"}))

        assert await service.display_name(Identity(ALICE.address)) == "alice.eth"

    @pytest.mark.asyncio
    async def test_unknown_identity_resolves_to_none(self):
        service = NamingService(StaticNameResolver({ALICE.address: "alice.eth"}))

        assert await service.display_name(Identity(BOB.address)) is None

    @pytest.mark.asyncio
    async def test_failure_degrades_to_none(self):
        service = NamingService(MockNameResolver(fail=True))

        assert await service.display_name(Identity(ALICE.address)) is None

    @pytest.mark.asyncio
    async def test_slow_lookup_times_out_to_none(self):
        resolver = MockNameResolver({ALICE.address: "alice.eth"}, delay_seconds=1.0)
        service = NamingService(resolver, timeout_seconds=0.01)

        assert await service.display_name(Identity(ALICE.address)) is None
        assert resolver.calls == [ALICE.address.lower()]
