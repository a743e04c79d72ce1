"""SQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from nnntp.domain.error import DuplicateUserError, StorageFailureError
from nnntp.domain.model import User
from nnntp.domain.repository import UserRepository
from nnntp.persistence.database import transaction
from nnntp.persistence.mappers import row_to_user
from nnntp.persistence.tables import users_table


class SqlUserRepository(UserRepository):
    """SQLAlchemy implementation of UserRepository."""

    def __init__(self, engine: Engine) -> None:
        """Initialize repository with a database engine.

        Args:
            engine: SQLAlchemy engine
        """
        self.engine = engine

    def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        with logfire.span("user_repository.find_by_username", username=username):
            stmt = select(users_table).where(users_table.c.username == username)
            with transaction(self.engine, "user.find_by_username") as connection:
                row = connection.execute(stmt).fetchone()

            if not row:
                return None

            return row_to_user(row._asdict())

    def create(self, username: str, password_digest: str) -> User:
        """Store a new user.

        The unique constraint on username catches a concurrent registration
        that slipped past the caller's existence check.
        """
        with logfire.span("user_repository.create", username=username):
            stmt = insert(users_table).values(
                username=username, password=password_digest
            )
            try:
                with transaction(self.engine, "user.create") as connection:
                    connection.execute(stmt)
            except StorageFailureError as e:
                if isinstance(e.cause, IntegrityError):
                    logfire.warn("Username already taken", username=username)
                    raise DuplicateUserError(username) from e
                raise

            return User(username=username, password_digest=password_digest)
