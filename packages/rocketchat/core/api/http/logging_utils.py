from __future__ import annotations

import logging
import time
from collections.abc import Mapping

from pydantic import BaseModel

logger = logging.getLogger("rocketchat.core.api.http")


def _lower_set(values: tuple[str, ...]) -> set[str]:
    """Convert tuple of strings to lowercase set."""
    return {v.lower() for v in values}


def redact_headers(headers: Mapping[str, str], redact: tuple[str, ...]) -> dict[str, str]:
    """Redact sensitive headers for logging.

    Args:
        headers: Headers to redact
        redact: Header names to redact (case-insensitive)

    Returns:
        Headers with sensitive values replaced with "***REDACTED***"
    """
    red = _lower_set(redact)
    out: dict[str, str] = {}
    for k, v in headers.items():
        if k.lower() in red:
            out[k] = "***REDACTED***"
        else:
            out[k] = v
    return out


class RequestLogContext(BaseModel):
    """Context for structured HTTP request logging.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Full request URL
        tag: Request tag used for cancellation
    """

    method: str
    url: str
    tag: str | None = None


def log_enqueue(
    ctx: RequestLogContext, headers: Mapping[str, str], redact: tuple[str, ...]
) -> float:
    """Log a request being handed to the transport.

    Args:
        ctx: Request log context
        headers: Request headers
        redact: Header names to redact

    Returns:
        Start timestamp for elapsed time calculation
    """
    start = time.perf_counter()
    logger.debug(
        f"Enqueueing: {ctx.method} - {ctx.url}",
        extra={
            "method": ctx.method,
            "url": ctx.url,
            "tag": ctx.tag,
            "headers": redact_headers(headers, redact),
        },
    )
    return start


def log_response(ctx: RequestLogContext, status_code: int, reason: str, elapsed_s: float) -> None:
    """Log HTTP response with timing information.

    Args:
        ctx: Request log context
        status_code: HTTP response status code
        reason: HTTP reason phrase
        elapsed_s: Elapsed time in seconds
    """
    logger.debug(
        f"Successful HTTP request: {ctx.method} - {ctx.url}: {status_code} {reason}",
        extra={
            "method": ctx.method,
            "url": ctx.url,
            "tag": ctx.tag,
            "status_code": status_code,
            "elapsed_ms": int(elapsed_s * 1000),
        },
    )


def log_failure(ctx: RequestLogContext, error: BaseException) -> None:
    """Log a transport failure (no response received).

    Args:
        ctx: Request log context
        error: Transport exception
    """
    logger.debug(
        f"Failed request: {ctx.method} - {ctx.url} - {error}",
        extra={"method": ctx.method, "url": ctx.url, "tag": ctx.tag},
    )
