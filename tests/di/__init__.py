"""Mock providers for testing."""

from .naming import MockNamingProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockNamingProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
