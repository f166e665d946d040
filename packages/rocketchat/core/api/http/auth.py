from __future__ import annotations

from typing import Protocol

from rocketchat.core.models.token import Token

AUTH_TOKEN_HEADER = "X-Auth-Token"
USER_ID_HEADER = "X-User-Id"


class TokenRepository(Protocol):
    """Protocol for storing authentication tokens keyed by server URL.

    Implementations can keep tokens in memory, on disk or in a keychain.
    The REST layer only reads from it when building requests.
    """

    def get(self, url: str) -> Token | None:
        """Get the token stored for a server.

        Args:
            url: Server URL

        Returns:
            Stored token, or None if the server has none
        """
        ...

    def save(self, url: str, token: Token) -> None:
        """Store a token for a server.

        Args:
            url: Server URL
            token: Token to store
        """
        ...

    def remove(self, url: str) -> None:
        """Forget the token for a server (no-op if absent)."""
        ...


class InMemoryTokenRepository:
    """Dict-backed TokenRepository.

    Example:
        >>> repo = InMemoryTokenRepository()
        >>> repo.save("https://chat.example.com", Token(auth_token="t", user_id="u"))
        >>> repo.get("https://chat.example.com").user_id
        'u'
    """

    def __init__(self) -> None:
        self._tokens: dict[str, Token] = {}

    def get(self, url: str) -> Token | None:
        return self._tokens.get(url)

    def save(self, url: str, token: Token) -> None:
        self._tokens[url] = token

    def remove(self, url: str) -> None:
        self._tokens.pop(url, None)


def token_headers(token: Token | None) -> dict[str, str]:
    """Build the authentication headers for a token.

    Args:
        token: Token to apply, or None

    Returns:
        ``X-Auth-Token`` and ``X-User-Id`` headers, or an empty dict
    """
    if token is None:
        return {}
    return {AUTH_TOKEN_HEADER: token.auth_token, USER_ID_HEADER: token.user_id}
