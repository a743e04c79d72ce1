"""Fixtures for end-to-end tests over the HTTP app."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from nnntp.client import NnntpClient, UserCredentials
from nnntp.interface.api.app import create_app
from tests.di import build_test_app_container


@pytest.fixture
def test_client(test_settings_env):
    """HTTP client for an app backed by a fresh SQLite file.

    Each HTTP request opens its own request scope, so the in-memory
    repositories would not survive between calls. E2E tests use real
    persistence instead.
    """
    container = build_test_app_container(unmock={"persistence"})
    app = create_app(container)

    yield TestClient(app)

    asyncio.run(container.close())


@pytest.fixture
def make_client(test_client):
    """Factory for NNNTP clients sharing the test app."""

    def _make(user: UserCredentials | None = None) -> NnntpClient:
        return NnntpClient(user=user, http_client=test_client)

    return _make
