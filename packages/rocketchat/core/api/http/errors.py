from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorData(BaseModel):
    """Structured data for REST client errors.

    Args:
        message: Human-readable error description
        url: Request URL
        status_code: HTTP status code (if a response was received)
        error_type: Server-provided error code (ApiError only)
        cause: Original exception that caused this error
    """

    model_config = {"arbitrary_types_allowed": True}

    message: str
    url: str | None = None
    status_code: int | None = None
    error_type: str | None = None
    cause: BaseException | None = Field(default=None, repr=False)


class RocketChatError(Exception):
    """Base exception for all REST client errors.

    Callers branch on the concrete subclass; transport and JSON library
    exceptions never escape the client wrapped in anything else.

    Attributes:
        data: Structured error data (ErrorData)
        message: Human-readable error description
        url: Request URL
        status_code: HTTP status code (if available)
        cause: Original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        error_type: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.data = ErrorData(
            message=message,
            url=url,
            status_code=status_code,
            error_type=error_type,
            cause=cause,
        )
        self.message = self.data.message
        self.url = self.data.url
        self.status_code = self.data.status_code
        self.cause = self.data.cause

        super().__init__(str(self))
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Format error for logging and display."""
        parts = [self.message]
        if self.url:
            parts.append(self.url)
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        return " | ".join(parts)


class NetworkError(RocketChatError):
    """Transport-level failure before a response arrived (DNS, refused, timeout)."""


class InvalidResponseError(RocketChatError):
    """Response body missing or not decodable into the expected type."""


class InvalidProtocolError(RocketChatError):
    """Server answered with a redirect where none was allowed (http vs https)."""


class AuthError(RocketChatError):
    """HTTP 401 authentication failure."""


class TwoFactorRequiredError(RocketChatError):
    """HTTP 401 asking for a two-factor (TOTP) code."""


class ApiError(RocketChatError):
    """Any other non-2xx response.

    Attributes:
        error_type: Server error code, or the numeric status as a string
    """

    def __init__(
        self,
        error_type: str,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            message,
            url=url,
            status_code=status_code,
            error_type=error_type,
            cause=cause,
        )
        self.error_type = error_type

    def __str__(self) -> str:
        return f"[{self.data.error_type}] {super().__str__()}"
