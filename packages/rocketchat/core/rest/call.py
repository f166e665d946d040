"""Bridge between the callback-driven transport and ``await``.

``handle_rest_call`` enqueues a request on the HttpTransport and suspends on a
future that the transport callback resolves exactly once:

- transport failure          -> NetworkError
- transport task cancelled   -> NetworkError("Canceled")
- transport task crashed     -> that exception, unwrapped
- non-2xx / redirect         -> error from ``classify_error``
- 2xx, body decodes          -> decoded value
- 2xx, body missing/invalid  -> InvalidResponseError
- 2xx, anything else raised  -> that exception, unwrapped

Cancelling the awaiting coroutine aborts the in-flight call by tag.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from rocketchat.core.api.http.client import HttpTransport
from rocketchat.core.api.http.config import HttpClientConfig, derive_transport_settings
from rocketchat.core.api.http.errors import InvalidResponseError, NetworkError
from rocketchat.core.api.http.request import RestRequest
from rocketchat.core.api.http.utils import safe_snippet
from rocketchat.core.rest.classifier import classify_error

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Decode failures that mean "the server sent something we cannot use".
DECODE_ERRORS: tuple[type[BaseException], ...] = (
    ValidationError,
    ValueError,
    httpx.StreamError,
    httpx.TransportError,
    OSError,
)


class _Completion:
    """Single-resolution slot around an asyncio future.

    The first ``resolve``/``fail`` wins; later ones (duplicate callbacks,
    completion after cancellation) are ignored.
    """

    def __init__(self, future: asyncio.Future[Any]) -> None:
        self._future = future

    @property
    def is_active(self) -> bool:
        return not self._future.done()

    def resolve(self, value: Any) -> bool:
        if not self.is_active:
            return False
        self._future.set_result(value)
        return True

    def fail(self, error: BaseException) -> bool:
        if not self.is_active:
            return False
        self._future.set_exception(error)
        return True


class _CallCallback:
    """TransportCallback that decodes into ``expected_type`` and completes the call."""

    def __init__(
        self,
        completion: _Completion,
        adapter: TypeAdapter[Any],
        settings: HttpClientConfig,
    ) -> None:
        self._completion = completion
        self._adapter = adapter
        self._settings = settings

    async def on_failure(self, request: RestRequest, error: httpx.RequestError) -> None:
        self._completion.fail(
            NetworkError(f"Network Error: {error}", url=request.url, cause=error)
        )

    async def on_response(self, request: RestRequest, response: httpx.Response) -> None:
        if not response.is_success:
            # classify_error closes the response
            error = await classify_error(request, response)
            self._completion.fail(error)
            return

        content = b""
        try:
            content = await response.aread()
            if not content:
                self._completion.fail(
                    InvalidResponseError("Error parsing JSON message", url=request.url)
                )
                return

            value = self._adapter.validate_json(content)
            if value is None:
                self._completion.fail(
                    InvalidResponseError("Error parsing JSON message", url=request.url)
                )
                return

            self._completion.resolve(value)
        except DECODE_ERRORS as e:
            if logger.isEnabledFor(logging.DEBUG):
                snippet = safe_snippet(content, self._settings.max_response_body_for_log)
                logger.debug(
                    f"Undecodable response from {request.url}",
                    extra={"url": request.url, "tag": request.tag, "body_snippet": snippet},
                )
            self._completion.fail(InvalidResponseError(str(e), url=request.url, cause=e))
        except Exception as e:
            self._completion.fail(e)
        finally:
            await response.aclose()


def _settle_unreported(
    completion: _Completion, request: RestRequest, task: asyncio.Task[None]
) -> None:
    """Fail a call whose transport task ended without invoking the callback.

    Covers tasks cancelled by someone other than the awaiting caller (client
    shutdown, ``cancel`` on a shared tag) and unexpected errors from ``send``.
    """
    if task.cancelled():
        if completion.fail(NetworkError("Canceled", url=request.url)):
            logger.debug(f"Transport call cancelled: {request.method} - {request.url}")
        return
    error = task.exception()
    if error is not None:
        completion.fail(error)


async def handle_rest_call(
    transport: HttpTransport,
    request: RestRequest,
    expected_type: type[T] | Any,
    *,
    large_file: bool = False,
    allow_redirects: bool = True,
    config: HttpClientConfig | None = None,
) -> T:
    """Execute a request and decode its JSON body into ``expected_type``.

    Args:
        transport: Shared transport
        request: Request to send
        expected_type: Pydantic model or any type ``TypeAdapter`` accepts
        large_file: Use extended read/write timeouts
        allow_redirects: Follow redirects; when False a redirect raises InvalidProtocolError
        config: Base configuration; defaults to the transport's own

    Returns:
        Decoded value

    Raises:
        NetworkError: Transport failure before a response arrived, or the
            transport call was cancelled by client shutdown or ``cancel(tag)``
        InvalidResponseError: Body missing or not decodable
        InvalidProtocolError: Redirect while redirects are disallowed
        AuthError: HTTP 401
        TwoFactorRequiredError: HTTP 401 asking for a TOTP code
        ApiError: Any other non-2xx status
    """
    settings = derive_transport_settings(
        config or transport.config,
        large_file=large_file,
        allow_redirects=allow_redirects,
    )
    adapter: TypeAdapter[Any] = TypeAdapter(expected_type)

    future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
    completion = _Completion(future)
    task = transport.enqueue(
        request, _CallCallback(completion, adapter, settings), settings=settings
    )
    task.add_done_callback(lambda t: _settle_unreported(completion, request, t))

    try:
        return await future
    except asyncio.CancelledError:
        if transport.cancel(request.tag):
            logger.debug(f"Cancelled: {request.method} - {request.url}")
        raise
