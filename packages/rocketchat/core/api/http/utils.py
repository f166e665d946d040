"""Utility functions for HTTP client operations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx


def build_url(
    base_url: str | httpx.URL,
    *segments: str,
    params: Mapping[str, Any] | None = None,
) -> httpx.URL:
    """Append path segments to a base URL.

    Each segment is percent-encoded on its own, so a "/" inside a segment
    never creates an extra path level. No other normalization is done.

    Args:
        base_url: Base URL (e.g. "https://chat.example.com")
        *segments: Path segments, appended in order
        params: Optional query parameters

    Returns:
        Built URL

    Example:
        >>> str(build_url("https://chat.example.com", "api", "v1", "me"))
        'https://chat.example.com/api/v1/me'
    """
    url = httpx.URL(str(base_url))
    path = url.path.rstrip("/")
    for segment in segments:
        path += "/" + quote(segment, safe="")
    url = url.copy_with(path=path or "/")
    if params:
        url = url.copy_merge_params({k: str(v) for k, v in params.items()})
    return url


def safe_snippet(content: bytes, limit: int) -> str:
    """Extract safe text snippet from response content for logging.

    Truncates content and decodes as UTF-8 with replacement for invalid bytes.

    Args:
        content: Response body bytes
        limit: Maximum number of bytes to include

    Returns:
        Truncated, decoded text snippet
    """
    if not content:
        return ""
    return content[:limit].decode("utf-8", errors="replace")


def is_redirect(response: httpx.Response) -> bool:
    """Check whether the status code is an HTTP redirect.

    Unlike ``httpx.Response.is_redirect`` this does not require a Location header.
    """
    return response.status_code in (300, 301, 302, 303, 307, 308)
