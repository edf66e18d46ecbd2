"""Display name infrastructure providers."""

from dishka import Scope, provide

from readproof.adapter.naming import StaticNameResolver
from readproof.config import NamingSettings
from readproof.domain.service import NameResolver
from readproof.util.di.base import ProviderBase


class NamingProvider(ProviderBase):
    """Naming component base."""

    __mock_component__ = "naming"


class ProdNamingProvider(NamingProvider):
    """Production naming provider serving configured static names."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_name_resolver(self, naming_settings: NamingSettings) -> NameResolver:
        """Provide name resolver, created once per process."""
        return StaticNameResolver(naming_settings.static_names)
