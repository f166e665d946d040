"""Server-level endpoints: info, service configurations, oauth and public settings.

None of these require authentication.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from rocketchat.core.api.http.request import RestRequest
from rocketchat.core.api.http.utils import build_url
from rocketchat.core.models.server import (
    ConfigurationsPayload,
    ServerInfo,
    SettingsOauth,
    SettingsPayload,
    Value,
)
from rocketchat.core.rest.builder import rest_api_url

if TYPE_CHECKING:
    from rocketchat.core.client import RocketChatClient

logger = logging.getLogger(__name__)


async def server_info(client: RocketChatClient) -> ServerInfo:
    """Fetch ``GET /api/info``.

    Redirects are not followed: a server redirecting http to https answers
    with InvalidProtocolError so the caller can retry with the right scheme.
    """
    url = build_url(client.rest_url, "api", "info")
    request = RestRequest(url=str(url))
    return await client.handle_rest_call(request, ServerInfo, allow_redirects=False)


async def configurations(client: RocketChatClient) -> dict[str, dict[str, str]]:
    """Fetch service configurations grouped by service name.

    Returns:
        Mapping of service name (e.g. "google") to its fields
    """
    url = rest_api_url(client.rest_url, "service.configurations")
    request = RestRequest(url=str(url))
    payload = await client.handle_rest_call(request, ConfigurationsPayload)
    return payload.by_service()


async def settings_oauth(client: RocketChatClient) -> SettingsOauth:
    """Fetch the list of available oauth services."""
    url = rest_api_url(client.rest_url, "settings.oauth")
    request = RestRequest(url=str(url))
    return await client.handle_rest_call(request, SettingsOauth)


async def settings(client: RocketChatClient, *names: str) -> dict[str, Value]:
    """Fetch public settings, optionally restricted to ``names``.

    Args:
        client: REST client
        *names: Setting ids to fetch; all public settings when empty

    Returns:
        Mapping of setting id to its typed value
    """
    params = {"count": "0", "fields": json.dumps({"type": 1})}
    if names:
        params["query"] = json.dumps({"_id": {"$in": list(names)}})
    url = rest_api_url(client.rest_url, "settings.public", **params)
    request = RestRequest(url=str(url))
    payload = await client.handle_rest_call(request, SettingsPayload)
    logger.debug(f"Fetched {len(payload.settings)} public settings")
    return payload.as_map()
