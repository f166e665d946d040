from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _new_tag() -> str:
    return uuid.uuid4().hex


class RestRequest(BaseModel):
    """An HTTP request ready to be handed to the transport.

    Built fresh for every call and immutable afterwards. The tag identifies the
    call when it has to be cancelled.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Absolute request URL
        headers: Request headers
        body: Optional request body
        tag: Opaque correlation id used for cancellation
    """

    model_config = ConfigDict(frozen=True)

    method: str = "GET"
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: bytes | None = Field(default=None, repr=False)
    tag: str = Field(default_factory=_new_tag)

    @field_validator("method")
    @classmethod
    def normalize_method(cls, v: str) -> str:
        """Upper-case the HTTP method."""
        return v.upper()
