"""Error payloads returned by the server on non-2xx responses."""

from pydantic import BaseModel, ConfigDict, Field

TOTP_REQUIRED = "totp-required"


class AuthenticationErrorMessage(BaseModel):
    """Body of a 401 response."""

    model_config = ConfigDict(extra="ignore")

    error: str | None = None
    message: str | None = None

    @property
    def is_totp_required(self) -> bool:
        return self.error == TOTP_REQUIRED


class ErrorMessage(BaseModel):
    """Body of any other error response."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    error_type: str | None = Field(default=None, alias="errorType")
    error: str | None = None
