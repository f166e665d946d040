"""Request construction for the REST API."""

from __future__ import annotations

import logging

import httpx

from rocketchat.core.api.http.auth import TokenRepository, token_headers
from rocketchat.core.api.http.request import RestRequest
from rocketchat.core.api.http.utils import build_url
from rocketchat.core.models.room import RoomType

logger = logging.getLogger(__name__)

MEDIA_TYPE_JSON = "application/json; charset=utf-8"

_ROOM_TYPE_PREFIXES: dict[RoomType, str] = {
    RoomType.CHANNEL: "channels",
    RoomType.PRIVATE_GROUP: "groups",
    RoomType.DIRECT_MESSAGE: "dm",
}


def get_rest_api_method_name_by_room_type(room_type: RoomType | str, method: str) -> str:
    """Build the REST method name for a room type.

    Channel -> ``channels.{method}``, private group -> ``groups.{method}``,
    direct message -> ``dm.{method}``. Livechat and custom room types fall
    back to ``channels.{method}``.

    Example:
        >>> get_rest_api_method_name_by_room_type(RoomType.PRIVATE_GROUP, "history")
        'groups.history'
    """
    parsed = RoomType.parse(room_type)
    prefix = _ROOM_TYPE_PREFIXES.get(parsed) if isinstance(parsed, RoomType) else None
    if prefix is None:
        # TODO: route livechat and custom room types once their endpoints are modelled
        logger.debug(f"No REST prefix for room type {room_type!r}, using channels")
        prefix = "channels"
    return f"{prefix}.{method}"


def rest_api_url(base_url: str | httpx.URL, method: str, **params: str) -> httpx.URL:
    """Build ``{base}/api/v1/{method}``."""
    return build_url(base_url, "api", "v1", method, params=params or None)


def build_authenticated_request(
    url: str | httpx.URL,
    token_repository: TokenRepository,
    server_url: str,
    *,
    method: str = "GET",
    body: bytes | None = None,
    content_type: str | None = None,
) -> RestRequest:
    """Build a request, attaching auth headers when a token is stored.

    A missing token is not an error; the request goes out unauthenticated.

    Args:
        url: Request URL
        token_repository: Token store
        server_url: Server URL the token is stored under
        method: HTTP method
        body: Optional request body
        content_type: Content-Type for the body (defaults to JSON when a body is given)

    Returns:
        Immutable request
    """
    headers = token_headers(token_repository.get(server_url))
    if body is not None:
        headers["Content-Type"] = content_type or MEDIA_TYPE_JSON
    return RestRequest(method=method, url=str(url), headers=headers, body=body)
