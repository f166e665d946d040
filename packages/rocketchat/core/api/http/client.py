"""Callback-driven HTTP transport built on HTTPX.

Provides:
- A shared ``httpx.AsyncClient`` (connection pool, TLS, redirects, timeouts)
- ``enqueue``: run one exchange in its own task and report through a callback
- ``cancel``: abort queued or running calls by request tag
- Request/response logging with header redaction
"""

from __future__ import annotations

import asyncio
import time
from typing import Protocol

import httpx

from rocketchat.core.api.http.config import HttpClientConfig
from rocketchat.core.api.http.logging_utils import (
    RequestLogContext,
    log_enqueue,
    log_failure,
    log_response,
)
from rocketchat.core.api.http.request import RestRequest


class TransportCallback(Protocol):
    """Receives the outcome of an enqueued call.

    Exactly one of the two methods is invoked per call, unless the call is
    cancelled first.
    """

    async def on_failure(self, request: RestRequest, error: httpx.RequestError) -> None:
        """Called when no response could be obtained (connect, timeout, protocol)."""
        ...

    async def on_response(self, request: RestRequest, response: httpx.Response) -> None:
        """Called with a streaming response; the callback owns closing it."""
        ...


class HttpTransport:
    """Asynchronous HTTP transport shared by all calls of a client.

    Args:
        config: Default transport configuration
        transport: Optional custom transport (useful for testing)

    Example:
        >>> async with HttpTransport(HttpClientConfig()) as transport:
        ...     transport.enqueue(request, callback)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or HttpClientConfig()
        self._client = httpx.AsyncClient(
            headers={"User-Agent": self.config.user_agent, **self.config.headers},
            timeout=self.config.timeout,
            limits=self.config.limits,
            follow_redirects=self.config.follow_redirects,
            verify=self.config.verify,
            transport=transport,
        )
        self._calls: dict[str, set[asyncio.Task[None]]] = {}

    async def aclose(self) -> None:
        """Cancel in-flight calls and close the underlying HTTP client."""
        for tag in list(self._calls):
            self.cancel(tag)
        await self._client.aclose()

    async def __aenter__(self) -> HttpTransport:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        """Async context manager exit."""
        await self.aclose()

    def enqueue(
        self,
        request: RestRequest,
        callback: TransportCallback,
        *,
        settings: HttpClientConfig | None = None,
    ) -> asyncio.Task[None]:
        """Submit a request without waiting for it.

        Must be called from a running event loop.

        Args:
            request: Request to send
            callback: Receives the response or the transport failure
            settings: Per-call settings (timeouts, redirects); defaults to ``config``

        Returns:
            Task running the exchange

        Raises:
            httpx.InvalidURL: If the request URL cannot be parsed
        """
        settings = settings or self.config
        http_request = self._client.build_request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
            timeout=settings.timeout,
        )
        ctx = RequestLogContext(method=request.method, url=request.url, tag=request.tag)
        start = log_enqueue(ctx, http_request.headers, settings.redact_headers)

        task = asyncio.get_running_loop().create_task(
            self._execute(request, http_request, callback, settings, ctx, start),
            name=f"rest-call-{request.tag}",
        )
        self._calls.setdefault(request.tag, set()).add(task)
        task.add_done_callback(lambda t: self._forget(request.tag, t))
        return task

    def cancel(self, tag: str) -> int:
        """Abort every queued or running call carrying ``tag``.

        Args:
            tag: Request tag

        Returns:
            Number of calls that were signalled
        """
        cancelled = 0
        for task in list(self._calls.get(tag, ())):
            if not task.done():
                task.cancel()
                cancelled += 1
        return cancelled

    def in_flight(self, tag: str) -> bool:
        """Check whether a call with ``tag`` is still running."""
        return any(not t.done() for t in self._calls.get(tag, ()))

    async def _execute(
        self,
        request: RestRequest,
        http_request: httpx.Request,
        callback: TransportCallback,
        settings: HttpClientConfig,
        ctx: RequestLogContext,
        start: float,
    ) -> None:
        try:
            response = await self._client.send(
                http_request,
                stream=True,
                follow_redirects=settings.follow_redirects,
            )
        except httpx.RequestError as e:
            log_failure(ctx, e)
            await callback.on_failure(request, e)
            return

        log_response(ctx, response.status_code, response.reason_phrase, time.perf_counter() - start)
        await callback.on_response(request, response)

    def _forget(self, tag: str, task: asyncio.Task[None]) -> None:
        tasks = self._calls.get(tag)
        if tasks is None:
            return
        tasks.discard(task)
        if not tasks:
            del self._calls[tag]
