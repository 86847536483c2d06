"""Configuration providers."""

from dishka import Scope, provide

from promptu.config import AuthSettings, DatabaseSettings, Settings, TrendingSettings
from promptu.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read once per container from the environment and ``.env``.

    Sections are exposed on their own so services depend only on the part
    of the configuration they use.
    """

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def database(self, settings: Settings) -> DatabaseSettings:
        return settings.database

    @provide
    def trending(self, settings: Settings) -> TrendingSettings:
        return settings.trending
