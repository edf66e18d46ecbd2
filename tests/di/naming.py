"""Mock naming providers for testing."""

from dishka import Scope, provide

from readproof.adapter.naming import MockNameResolver
from readproof.domain.service import NameResolver
from readproof.util.di.infrastructure.naming import NamingProvider
from tests.signing import ALICE

# Only alice has a display name; bob resolves to None
KNOWN_NAMES = {ALICE.address: "alice.eth"}


class MockNamingProvider(NamingProvider):
    """Mock naming provider serving deterministic names without any lookup."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_name_resolver(self) -> NameResolver:
        """Provide mock name resolver."""
        return MockNameResolver(KNOWN_NAMES)
