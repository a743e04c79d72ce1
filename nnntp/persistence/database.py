"""Database engine and transaction management.

Provides a pooled engine, idempotent schema setup and a transaction helper
that turns backend failures into StorageFailureError.
"""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

from nnntp.config import Settings
from nnntp.domain.error import StorageFailureError
from nnntp.persistence.tables import metadata


def create_engine(settings: Settings) -> Engine:
    """Create database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured engine
    """
    url = make_url(settings.database_url)
    kwargs = {}
    if url.get_backend_name() != "sqlite":
        kwargs = {
            "pool_size": settings.database.pool_size,
            "max_overflow": settings.database.max_overflow,
        }

    return sa_create_engine(
        url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        **kwargs,
    )


def ensure_schema(engine: Engine) -> None:
    """Create any missing tables.

    Existing tables are left alone, so this is safe to run on every start.

    Args:
        engine: Database engine

    Raises:
        StorageFailureError: If the schema cannot be created
    """
    with logfire.span("database.ensure_schema"):
        try:
            metadata.create_all(engine, checkfirst=True)
        except SQLAlchemyError as e:
            logfire.error("Schema setup failed", error=str(e))
            raise StorageFailureError("schema setup", e) from e


@contextmanager
def transaction(engine: Engine, operation: str) -> Iterator[Connection]:
    """Run a block in its own transaction on a pooled connection.

    Commits when the block finishes, rolls back when it raises.

    Args:
        engine: Database engine
        operation: Name used in logs and in the raised error

    Yields:
        Connection bound to the transaction

    Raises:
        StorageFailureError: If the backend fails or cannot bind a parameter
            (an integer outside its range, text it cannot encode)
    """
    try:
        with engine.begin() as connection:
            yield connection
    except (SQLAlchemyError, OverflowError, UnicodeEncodeError) as e:
        logfire.error(
            "Storage operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise StorageFailureError(operation, e) from e
