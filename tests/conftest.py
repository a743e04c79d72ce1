"""Test configuration and fixtures."""

import logfire
import pytest

from nnntp.client import UserCredentials

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def test_settings_env(monkeypatch, tmp_path):
    """Point settings at a throwaway database with cheap hashing.

    Settings are read from the environment when a container first resolves
    them, so every test gets its own SQLite file.
    """
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("DATABASE__URL", f"sqlite:///{tmp_path / 'nnntp.db'}")
    monkeypatch.setenv("AUTH__BCRYPT_ROUNDS", "4")
    monkeypatch.delenv("AUTH__COMMENT_POLICY", raising=False)


@pytest.fixture
def alice() -> UserCredentials:
    """Credentials for a test user."""
    return UserCredentials(username="alice", password="s3cret", email="alice@example.com")
