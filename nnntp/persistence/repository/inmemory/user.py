"""In-memory user repository for testing."""

from typing import Optional

from nnntp.domain.error import DuplicateUserError
from nnntp.domain.model.user import User
from nnntp.domain.repository.user import UserRepository


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        return self._users.get(username)

    def create(self, username: str, password_digest: str) -> User:
        """Store a new user."""
        if username in self._users:
            raise DuplicateUserError(username)
        user = User(username=username, password_digest=password_digest)
        self._users[username] = user
        return user
