"""Authentication domain service."""

from abc import ABC, abstractmethod

import logfire

from nnntp.domain.error import DuplicateUserError, InvalidUserError, UnknownUserError
from nnntp.domain.model.user import User
from nnntp.domain.repository import UserRepository

from .base import Service


class PasswordHasher(ABC):
    """One-way password hashing interface."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            Salted digest suitable for storage
        """
        pass

    @abstractmethod
    def verify(self, password: str, digest: str) -> bool:
        """Check a plaintext password against a stored digest.

        Args:
            password: Plaintext password
            digest: Digest previously returned by hash()

        Returns:
            True if the password matches
        """
        pass


class AuthService(Service):
    """Domain service for account registration and credential checks."""

    def __init__(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            password_hasher: Password hashing implementation
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    def register(self, username: str, password: str) -> User:
        """Register a new account.

        The username is checked before hashing so a duplicate costs no
        hashing work and writes nothing.

        Args:
            username: Requested username
            password: Plaintext password

        Returns:
            The stored user

        Raises:
            DuplicateUserError: If the username is already taken
        """
        with logfire.span("auth_service.register", username=username):
            if self.user_repository.find_by_username(username) is not None:
                logfire.warn("Registration for existing user", username=username)
                raise DuplicateUserError(username)

            digest = self.password_hasher.hash(password)
            user = self.user_repository.create(username, digest)
            logfire.info("User registered", username=username)
            return user

    def verify(self, username: str, password: str) -> bool:
        """Check a username/password pair.

        Args:
            username: Username
            password: Plaintext password

        Returns:
            True if the password matches the stored digest

        Raises:
            UnknownUserError: If the username does not exist
        """
        with logfire.span("auth_service.verify", username=username):
            user = self.user_repository.find_by_username(username)
            if user is None:
                logfire.warn("Verification for unknown user", username=username)
                raise UnknownUserError(username)

            valid = self.password_hasher.verify(password, user.password_digest)
            logfire.debug("Credentials checked", username=username, valid=valid)
            return valid

    def authenticate(self, username: str, password: str) -> None:
        """Require a valid username/password pair.

        Raises:
            UnknownUserError: If the username does not exist
            InvalidUserError: If the password does not match
        """
        if not self.verify(username, password):
            logfire.warn("Authentication failed", username=username)
            raise InvalidUserError(username)
