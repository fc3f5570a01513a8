"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from threadtree.config import Settings, StorageSettings, ThreadSettings
from threadtree.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_thread_settings(self, settings: Settings) -> ThreadSettings:
        """Provide comment tree settings."""
        return settings.threads

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide blob store settings."""
        return settings.storage
