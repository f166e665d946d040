"""REST client facade for one chat server."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx

from rocketchat.core.api.http.auth import InMemoryTokenRepository, TokenRepository
from rocketchat.core.api.http.client import HttpTransport
from rocketchat.core.api.http.config import HttpClientConfig
from rocketchat.core.api.http.request import RestRequest
from rocketchat.core.rest.builder import build_authenticated_request
from rocketchat.core.rest.call import handle_rest_call

logger = logging.getLogger(__name__)

T = TypeVar("T")


def validate_server_url(url: str) -> str:
    """Check that a server URL is absolute http(s).

    Raises:
        ValueError: If the scheme is missing or not http/https
    """
    if not url.startswith(("http://", "https://")):
        raise ValueError(f"Server URL must start with http:// or https://: {url!r}")
    return url


class RocketChatClient:
    """Client bound to one server URL.

    Holds the token repository and the shared transport. Endpoint functions in
    ``rocketchat.core.rest.server`` take a client as their first argument.

    Args:
        url: Server base URL (e.g. "https://open.rocket.chat")
        token_repository: Token store (defaults to an in-memory one)
        config: Shared transport configuration
        transport: Optional custom httpx transport (useful for testing)

    Example:
        >>> async with RocketChatClient("https://open.rocket.chat") as client:
        ...     info = await server_info(client)
        ...     print(info.version)
    """

    def __init__(
        self,
        url: str,
        *,
        token_repository: TokenRepository | None = None,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = validate_server_url(url)
        self.rest_url = httpx.URL(url)
        self.token_repository = token_repository or InMemoryTokenRepository()
        self.config = config or HttpClientConfig()
        self.http = HttpTransport(self.config, transport=transport)

    async def aclose(self) -> None:
        """Close the underlying transport and release resources."""
        await self.http.aclose()

    async def __aenter__(self) -> RocketChatClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        """Async context manager exit."""
        await self.aclose()

    def request_builder(
        self,
        url: str | httpx.URL,
        *,
        method: str = "GET",
        body: bytes | None = None,
    ) -> RestRequest:
        """Build a request carrying this server's token, if any."""
        return build_authenticated_request(
            url, self.token_repository, self.url, method=method, body=body
        )

    async def handle_rest_call(
        self,
        request: RestRequest,
        expected_type: type[T] | Any,
        *,
        large_file: bool = False,
        allow_redirects: bool = True,
    ) -> T:
        """Execute a request on the shared transport.

        See ``rocketchat.core.rest.call.handle_rest_call``.
        """
        return await handle_rest_call(
            self.http,
            request,
            expected_type,
            large_file=large_file,
            allow_redirects=allow_redirects,
            config=self.config,
        )
