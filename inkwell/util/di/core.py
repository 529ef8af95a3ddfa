"""Configuration providers."""

from dishka import Scope, provide

from inkwell.config import AuthSettings, ContentSettings, Settings
from inkwell.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the sections services depend on, built once per app."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Read settings from the environment and .env."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        return settings.content
