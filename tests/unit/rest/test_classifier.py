"""Tests for classify_error."""

from __future__ import annotations

import httpx
import pytest

from rocketchat.core.api.http.errors import (
    ApiError,
    AuthError,
    InvalidProtocolError,
    TwoFactorRequiredError,
)
from rocketchat.core.api.http.request import RestRequest
from rocketchat.core.rest.classifier import classify_error
from tests.fixtures.http import SERVER_URL, TrackingStream

REQUEST = RestRequest(url=f"{SERVER_URL}/api/v1/me")


def _response(status: int, body: bytes) -> tuple[httpx.Response, TrackingStream]:
    stream = TrackingStream(body)
    return httpx.Response(status, stream=stream), stream


class TestAuthenticationErrors:
    """401 responses."""

    @pytest.mark.asyncio
    async def test_totp_marker_requires_two_factor(self):
        response, stream = _response(401, b'{"error": "totp-required", "message": "m"}')

        error = await classify_error(REQUEST, response)

        assert isinstance(error, TwoFactorRequiredError)
        assert error.message == "m"
        assert error.status_code == 401
        assert stream.close_count == 1

    @pytest.mark.asyncio
    async def test_totp_marker_without_message(self):
        response, _ = _response(401, b'{"error": "totp-required"}')

        error = await classify_error(REQUEST, response)

        assert isinstance(error, TwoFactorRequiredError)
        assert error.message == ""

    @pytest.mark.asyncio
    async def test_plain_auth_failure_keeps_server_message(self):
        response, _ = _response(401, b'{"message": "bad creds"}')

        error = await classify_error(REQUEST, response)

        assert type(error) is AuthError
        assert error.message == "bad creds"
        assert error.url == REQUEST.url

    @pytest.mark.asyncio
    async def test_auth_failure_without_message_uses_default(self):
        response, _ = _response(401, b'{"error": "Unauthorized"}')

        error = await classify_error(REQUEST, response)

        assert type(error) is AuthError
        assert error.message == "Authentication problem"

    @pytest.mark.asyncio
    async def test_malformed_401_body_falls_back_to_api_error(self):
        response, stream = _response(401, b"<html>Unauthorized</html>")

        error = await classify_error(REQUEST, response)

        assert isinstance(error, ApiError)
        assert error.error_type == "401"
        assert error.cause is not None
        assert stream.close_count == 1


class TestApiErrors:
    """Every other non-2xx status."""

    @pytest.mark.asyncio
    async def test_server_error_type_and_message(self):
        response, stream = _response(404, b'{"errorType": "not-found", "error": "no such room"}')

        error = await classify_error(REQUEST, response)

        assert isinstance(error, ApiError)
        assert error.error_type == "not-found"
        assert error.message == "no such room"
        assert error.status_code == 404
        assert stream.close_count == 1

    @pytest.mark.asyncio
    async def test_missing_fields_use_status_and_unknown_error(self):
        response, _ = _response(400, b"{}")

        error = await classify_error(REQUEST, response)

        assert isinstance(error, ApiError)
        assert error.error_type == "400"
        assert error.message == "unknown error"

    @pytest.mark.asyncio
    async def test_empty_body_never_raises(self):
        response, stream = _response(500, b"")

        error = await classify_error(REQUEST, response)

        assert isinstance(error, ApiError)
        assert error.error_type == "500"
        assert error.status_code == 500
        assert stream.close_count == 1

    @pytest.mark.asyncio
    async def test_str_includes_error_type(self):
        response, _ = _response(403, b'{"errorType": "error-not-allowed", "error": "Not allowed"}')

        error = await classify_error(REQUEST, response)

        assert str(error).startswith("[error-not-allowed] Not allowed")


class TestRedirects:
    """Redirects reaching the classifier were not followed."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [301, 302, 307, 308])
    async def test_redirect_is_invalid_protocol(self, status):
        response, stream = _response(status, b'{"errorType": "ignored"}')

        error = await classify_error(REQUEST, response)

        assert isinstance(error, InvalidProtocolError)
        assert error.message == "Invalid Protocol"
        assert error.status_code == status
        assert stream.close_count == 1
