"""Map a failed HTTP response onto one RocketChatError subclass."""

from __future__ import annotations

import logging

import httpx

from rocketchat.core.api.http.errors import (
    ApiError,
    AuthError,
    InvalidProtocolError,
    RocketChatError,
    TwoFactorRequiredError,
)
from rocketchat.core.api.http.request import RestRequest
from rocketchat.core.api.http.utils import is_redirect
from rocketchat.core.models.errors import AuthenticationErrorMessage, ErrorMessage

logger = logging.getLogger(__name__)

MISSING_BODY = "missing body"


async def classify_error(request: RestRequest, response: httpx.Response) -> RocketChatError:
    """Classify a non-2xx (or disallowed redirect) response.

    Never raises for malformed bodies: any failure while reading or decoding
    falls back to an ApiError carrying the status code. The response is closed
    before returning.

    Args:
        request: Request that produced the response
        response: Streaming response with a non-2xx status

    Returns:
        Error to deliver to the caller
    """
    status = response.status_code
    try:
        if is_redirect(response):
            return InvalidProtocolError("Invalid Protocol", url=request.url, status_code=status)

        content = await response.aread()
        body = content.decode(response.encoding or "utf-8") if content else MISSING_BODY
        logger.debug(f"Error body: {body}")

        if status == 401:
            auth_message = AuthenticationErrorMessage.model_validate_json(body)
            if auth_message.is_totp_required:
                return TwoFactorRequiredError(
                    auth_message.message or "", url=request.url, status_code=status
                )
            return AuthError(
                auth_message.message or "Authentication problem",
                url=request.url,
                status_code=status,
            )

        error_message = ErrorMessage.model_validate_json(body)
        return ApiError(
            error_message.error_type or str(status),
            error_message.error or "unknown error",
            url=request.url,
            status_code=status,
        )
    except Exception as e:
        return ApiError(str(status), str(e), url=request.url, status_code=status, cause=e)
    finally:
        await response.aclose()
