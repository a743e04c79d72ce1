"""Persistence infrastructure providers."""

from collections.abc import Iterator

from dishka import Scope, provide
import logfire
from sqlalchemy.engine import Engine

from nnntp.config import Settings
from nnntp.domain.repository import CommentRepository, PostRepository, UserRepository
from nnntp.persistence.database import create_engine, ensure_schema
from nnntp.persistence.repository import (
    SqlCommentRepository,
    SqlPostRepository,
    SqlUserRepository,
)
from nnntp.util.di.base import ProviderBase
from nnntp.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using SQLAlchemy."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> Iterator[Engine]:
        """Provide database engine with the schema in place.

        The engine's pool is disposed when the container closes.
        """
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        ensure_schema(engine)
        yield engine
        engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_user_repository(self, engine: Engine) -> UserRepository:
        """Provide User repository."""
        return SqlUserRepository(engine)

    @provide(scope=Scope.APP)
    def get_post_repository(self, engine: Engine) -> PostRepository:
        """Provide Post repository."""
        return SqlPostRepository(engine)

    @provide(scope=Scope.APP)
    def get_comment_repository(self, engine: Engine) -> CommentRepository:
        """Provide Comment repository."""
        return SqlCommentRepository(engine)
