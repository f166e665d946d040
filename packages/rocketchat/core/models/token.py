from pydantic import BaseModel, ConfigDict, Field


class Token(BaseModel):
    """Authentication credential pair for one server."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    auth_token: str = Field(alias="authToken", repr=False)
    user_id: str = Field(alias="userId")
