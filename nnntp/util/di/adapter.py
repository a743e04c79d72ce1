"""Adapter DI providers."""

from dishka import Scope, provide

from nnntp.adapter.hashing import BcryptPasswordHasher
from nnntp.config import AuthSettings
from nnntp.domain.service import PasswordHasher
from nnntp.util.di.base import ProviderBase


class ProdAdapterProvider(ProviderBase):
    """Adapter provider - concrete, no mocks needed."""

    scope = Scope.APP

    @provide
    def get_password_hasher(self, auth_settings: AuthSettings) -> PasswordHasher:
        """Provide bcrypt password hasher."""
        return BcryptPasswordHasher(rounds=auth_settings.bcrypt_rounds)
