"""Core DI providers (non-mockable)."""

import logfire
from dishka import Scope, provide

from shareport.config import Settings
from shareport.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings provider, shared by production and test containers.

    Tests point it at their own database through ``DATABASE__URL``.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Load settings once per container."""
        settings = Settings()
        logfire.info(
            "Settings loaded",
            environment=settings.environment,
            git_sha=settings.git_sha,
        )
        return settings
