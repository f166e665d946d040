"""Tests for request construction and room-type method names."""

from __future__ import annotations

import pytest

from rocketchat.core.api.http.auth import AUTH_TOKEN_HEADER, USER_ID_HEADER
from rocketchat.core.api.http.utils import build_url
from rocketchat.core.client import RocketChatClient
from rocketchat.core.models.room import RoomType
from rocketchat.core.rest.builder import (
    MEDIA_TYPE_JSON,
    build_authenticated_request,
    get_rest_api_method_name_by_room_type,
    rest_api_url,
)
from tests.fixtures.http import SERVER_URL


class TestBuildUrl:
    """Test suite for build_url."""

    def test_appends_segments(self):
        url = build_url(SERVER_URL, "api", "info")
        assert str(url) == f"{SERVER_URL}/api/info"

    def test_keeps_base_path(self):
        url = build_url("https://example.test/chat/", "api", "v1", "me")
        assert str(url) == "https://example.test/chat/api/v1/me"

    def test_segment_slash_is_encoded(self):
        url = build_url(SERVER_URL, "api", "a/b")
        assert str(url) == f"{SERVER_URL}/api/a%2Fb"

    def test_query_params(self):
        url = build_url(SERVER_URL, "api", "v1", "settings.public", params={"count": 0})
        assert url.params["count"] == "0"


class TestRestApiUrl:
    """Test suite for rest_api_url."""

    def test_versioned_path(self):
        url = rest_api_url(SERVER_URL, "service.configurations")
        assert str(url) == f"{SERVER_URL}/api/v1/service.configurations"

    def test_params(self):
        url = rest_api_url(SERVER_URL, "channels.history", roomId="GENERAL")
        assert url.path == "/api/v1/channels.history"
        assert url.params["roomId"] == "GENERAL"


class TestBuildAuthenticatedRequest:
    """Test suite for build_authenticated_request."""

    def test_attaches_stored_token(self, token_repository, token):
        token_repository.save(SERVER_URL, token)

        request = build_authenticated_request(
            f"{SERVER_URL}/api/v1/me", token_repository, SERVER_URL
        )

        assert request.headers[AUTH_TOKEN_HEADER] == "auth-123"
        assert request.headers[USER_ID_HEADER] == "user-456"
        assert request.method == "GET"

    def test_missing_token_builds_unauthenticated_request(self, token_repository):
        request = build_authenticated_request(
            f"{SERVER_URL}/api/v1/me", token_repository, SERVER_URL
        )

        assert AUTH_TOKEN_HEADER not in request.headers
        assert USER_ID_HEADER not in request.headers

    def test_token_of_other_server_is_not_used(self, token_repository, token):
        token_repository.save("https://other.example.test", token)

        request = build_authenticated_request(
            f"{SERVER_URL}/api/v1/me", token_repository, SERVER_URL
        )

        assert request.headers == {}

    def test_body_defaults_to_json_content_type(self, token_repository):
        request = build_authenticated_request(
            f"{SERVER_URL}/api/v1/chat.postMessage",
            token_repository,
            SERVER_URL,
            method="post",
            body=b'{"text": "hi"}',
        )

        assert request.method == "POST"
        assert request.body == b'{"text": "hi"}'
        assert request.headers["Content-Type"] == MEDIA_TYPE_JSON

    def test_each_request_gets_its_own_tag(self, token_repository):
        first = build_authenticated_request(SERVER_URL, token_repository, SERVER_URL)
        second = build_authenticated_request(SERVER_URL, token_repository, SERVER_URL)

        assert first.tag != second.tag

    def test_client_request_builder_uses_client_token(self, make_client, token_repository, token):
        token_repository.save(SERVER_URL, token)
        client = make_client(lambda request: None)

        request = client.request_builder(rest_api_url(client.rest_url, "me"))

        assert request.url == f"{SERVER_URL}/api/v1/me"
        assert request.headers[AUTH_TOKEN_HEADER] == "auth-123"


class TestRoomTypeMethodName:
    """Test suite for get_rest_api_method_name_by_room_type."""

    @pytest.mark.parametrize(
        ("room_type", "expected"),
        [
            (RoomType.CHANNEL, "channels.history"),
            (RoomType.PRIVATE_GROUP, "groups.history"),
            (RoomType.DIRECT_MESSAGE, "dm.history"),
            ("c", "channels.history"),
            ("p", "groups.history"),
            ("d", "dm.history"),
        ],
    )
    def test_known_room_types(self, room_type, expected):
        assert get_rest_api_method_name_by_room_type(room_type, "history") == expected

    def test_livechat_falls_back_to_channels(self):
        assert get_rest_api_method_name_by_room_type(RoomType.LIVECHAT, "messages") == (
            "channels.messages"
        )

    def test_custom_room_type_falls_back_to_channels(self):
        assert get_rest_api_method_name_by_room_type("x", "history") == "channels.history"

    def test_parse_keeps_unknown_raw_value(self):
        assert RoomType.parse("p") is RoomType.PRIVATE_GROUP
        assert RoomType.parse("custom") == "custom"


def test_client_rejects_url_without_scheme() -> None:
    with pytest.raises(ValueError, match="http://"):
        RocketChatClient("chat.example.com")
