"""REST API: request building, call bridge, error classification and endpoints."""

from rocketchat.core.rest.builder import (
    MEDIA_TYPE_JSON,
    build_authenticated_request,
    get_rest_api_method_name_by_room_type,
    rest_api_url,
)
from rocketchat.core.rest.call import handle_rest_call
from rocketchat.core.rest.classifier import classify_error
from rocketchat.core.rest.server import configurations, server_info, settings, settings_oauth

__all__ = [
    "MEDIA_TYPE_JSON",
    "build_authenticated_request",
    "classify_error",
    "configurations",
    "get_rest_api_method_name_by_room_type",
    "handle_rest_call",
    "rest_api_url",
    "server_info",
    "settings",
    "settings_oauth",
]
