from __future__ import annotations

import httpx
from pydantic import BaseModel, Field, field_validator

LARGE_FILE_TIMEOUT_S = 90.0


class HttpClientConfig(BaseModel):
    """Configuration for the shared HttpTransport.

    One instance is shared by every call made through a client. Calls that need
    different timeouts or redirect handling get a derived copy from
    ``derive_transport_settings``; this instance is frozen and never changes.

    Args:
        timeout: HTTPX timeout configuration
        limits: Connection pool limits
        follow_redirects: Whether to follow HTTP redirects
        headers: Default headers applied to all requests
        verify: TLS certificate verification (True, False, or path to CA bundle)
        user_agent: User-Agent header value
        redact_headers: Headers to redact in logs (case-insensitive)
        large_file_timeout_s: Read/write timeout used for large file transfers
        max_response_body_for_log: Max response bytes to include in debug logs
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    timeout: httpx.Timeout = Field(default_factory=lambda: httpx.Timeout(10.0, connect=10.0))
    limits: httpx.Limits = Field(
        default_factory=lambda: httpx.Limits(max_keepalive_connections=20, max_connections=100)
    )
    follow_redirects: bool = True
    headers: dict[str, str] = Field(default_factory=dict)
    verify: bool | str = True
    user_agent: str = "rocketchat-rest/0.1"
    redact_headers: tuple[str, ...] = (
        "authorization",
        "proxy-authorization",
        "cookie",
        "set-cookie",
        "x-auth-token",
    )
    large_file_timeout_s: float = Field(default=LARGE_FILE_TIMEOUT_S, gt=0)
    max_response_body_for_log: int = 4096

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, v: str) -> str:
        """Reject an empty User-Agent."""
        if not v.strip():
            raise ValueError("user_agent cannot be empty")
        return v


def derive_transport_settings(
    config: HttpClientConfig,
    *,
    large_file: bool = False,
    allow_redirects: bool = True,
) -> HttpClientConfig:
    """Select the transport settings for a single call.

    Returns ``config`` itself when no override applies. Otherwise returns a new
    frozen copy with extended read/write timeouts (large files) and/or redirect
    following disabled.

    Args:
        config: Shared default configuration
        large_file: Use extended read/write timeouts
        allow_redirects: Follow redirects automatically

    Returns:
        Configuration to use for the call
    """
    if not large_file and allow_redirects:
        return config

    updates: dict[str, object] = {"follow_redirects": allow_redirects}
    if large_file:
        base = config.timeout
        updates["timeout"] = httpx.Timeout(
            connect=base.connect,
            read=config.large_file_timeout_s,
            write=config.large_file_timeout_s,
            pool=base.pool,
        )
    return config.model_copy(update=updates)
