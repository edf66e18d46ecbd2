"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from readproof.config import (
    CommentSettings,
    NamingSettings,
    ProtocolSettings,
    Settings,
    SigningSettings,
)
from readproof.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_signing_settings(self, settings: Settings) -> SigningSettings:
        """Provide signed message settings."""
        return settings.signing

    @provide(scope=Scope.APP)
    def provide_protocol_settings(self, settings: Settings) -> ProtocolSettings:
        """Provide message protocol settings."""
        return settings.protocol

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment listing settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_naming_settings(self, settings: Settings) -> NamingSettings:
        """Provide display name settings."""
        return settings.naming
