"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from nnntp.domain.model.user import User


class UserRepository(ABC):
    """Repository for User entities.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The unique username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    def create(self, username: str, password_digest: str) -> User:
        """Store a new user.

        Args:
            username: The unique username
            password_digest: bcrypt digest of the password

        Returns:
            The stored user

        Raises:
            DuplicateUserError: If the username is already taken
            StorageFailureError: If the backend fails
        """
        pass
