"""Shared pytest fixtures for rocketchat tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio

from rocketchat.core.api.http.auth import InMemoryTokenRepository
from rocketchat.core.client import RocketChatClient
from rocketchat.core.models.token import Token
from tests.fixtures.http import SERVER_URL

# ============================================================================
# Credential Fixtures
# ============================================================================


@pytest.fixture
def server_url() -> str:
    """Base URL of the fake server."""
    return SERVER_URL


@pytest.fixture
def token() -> Token:
    """A stored credential pair."""
    return Token(auth_token="auth-123", user_id="user-456")


@pytest.fixture
def token_repository() -> InMemoryTokenRepository:
    """Empty in-memory token store."""
    return InMemoryTokenRepository()


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def make_client(
    token_repository: InMemoryTokenRepository,
) -> Callable[[Callable[[httpx.Request], httpx.Response]], RocketChatClient]:
    """Factory building a RocketChatClient on top of an httpx.MockTransport."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> RocketChatClient:
        return RocketChatClient(
            SERVER_URL,
            token_repository=token_repository,
            transport=httpx.MockTransport(handler),
        )

    return _make


@pytest_asyncio.fixture
async def json_client(make_client) -> AsyncIterator[tuple[RocketChatClient, list[httpx.Request]]]:
    """Client whose fake server answers every request with ``{"version": "6.4.0"}``.

    Yields the client and the list of requests the server received.
    """
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"version": "6.4.0", "success": True})

    client = make_client(handler)
    yield client, seen
    await client.aclose()
