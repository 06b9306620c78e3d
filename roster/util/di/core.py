"""Configuration provider."""

from dishka import Scope, provide

from roster.config import Settings
from roster.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings provider, shared by production and test containers.

    Settings are read once per container from the environment and ``.env``.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide roster settings (database URL, API prefix, observability)."""
        return Settings()
