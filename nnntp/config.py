"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from nnntp.domain.value import CommentPolicy


class DatabaseSettings(BaseModel):
    """Database configuration."""

    url: str = "sqlite:///nnntp.db"
    pool_size: int = 5
    max_overflow: int = 10


class AuthSettings(BaseModel):
    """Authentication configuration."""

    # bcrypt work factor (log2 rounds), 4-31
    bcrypt_rounds: int = 12

    # What to do with a comment whose parent post does not exist
    # permissive: store it anyway
    # strict: reject it without writing
    comment_policy: CommentPolicy = CommentPolicy.PERMISSIVE


class ClientSettings(BaseModel):
    """Client configuration used by NnntpClient.from_settings."""

    base_url: str = "http://localhost:8000"
    timeout: float = 10.0


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # OBSERVABILITY__LOGFIRE_TOKEN, unset for console-only output
    logfire_token: str | None = None

    # OBSERVABILITY__SEND_TO_LOGFIRE, unset to follow the token
    send_to_logfire: bool | None = None

    @property
    def sends_to_logfire(self) -> bool:
        """Whether telemetry leaves the process.

        An explicit setting wins, otherwise a token turns sending on.
        """
        if self.send_to_logfire is not None:
            return self.send_to_logfire
        return self.logfire_token is not None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        HOST=0.0.0.0
        PORT=8000
        DATABASE__URL=sqlite:////var/lib/nnntp/nnntp.db
        AUTH__COMMENT_POLICY=strict
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows DATABASE__URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "localhost"
    port: int = 8000

    # Nested settings
    database: DatabaseSettings = DatabaseSettings()
    auth: AuthSettings = AuthSettings()
    client: ClientSettings = ClientSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @property
    def database_url(self) -> str:
        """Shortcut for database.url."""
        return self.database.url
