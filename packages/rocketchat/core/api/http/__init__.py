"""HTTPX-based transport layer.

Exposes a small surface:
- HttpTransport: callback-driven async transport with cancellation by tag
- HttpClientConfig / derive_transport_settings: configuration
- RestRequest: immutable request model
- Exceptions: RocketChatError and subclasses
- Token storage: TokenRepository, InMemoryTokenRepository
"""

from rocketchat.core.api.http.auth import (
    AUTH_TOKEN_HEADER,
    USER_ID_HEADER,
    InMemoryTokenRepository,
    TokenRepository,
    token_headers,
)
from rocketchat.core.api.http.client import HttpTransport, TransportCallback
from rocketchat.core.api.http.config import HttpClientConfig, derive_transport_settings
from rocketchat.core.api.http.errors import (
    ApiError,
    AuthError,
    InvalidProtocolError,
    InvalidResponseError,
    NetworkError,
    RocketChatError,
    TwoFactorRequiredError,
)
from rocketchat.core.api.http.request import RestRequest

__all__ = [
    "AUTH_TOKEN_HEADER",
    "USER_ID_HEADER",
    "HttpTransport",
    "TransportCallback",
    "HttpClientConfig",
    "derive_transport_settings",
    "RestRequest",
    "InMemoryTokenRepository",
    "TokenRepository",
    "token_headers",
    "RocketChatError",
    "NetworkError",
    "InvalidResponseError",
    "InvalidProtocolError",
    "AuthError",
    "TwoFactorRequiredError",
    "ApiError",
]
