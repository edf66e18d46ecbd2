"""Infrastructure providers."""

# Import bases
from .naming import NamingProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .naming import ProdNamingProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "NamingProvider",
    "PersistenceProvider",
    "ProdNamingProvider",
    "ProdPersistenceProvider",
]
