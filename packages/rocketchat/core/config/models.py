"""Configuration models for the REST client."""

from __future__ import annotations

import httpx
from pydantic import BaseModel, ConfigDict, Field

from rocketchat.core.api.http.config import LARGE_FILE_TIMEOUT_S, HttpClientConfig


class HttpConfigSection(BaseModel):
    """HTTP transport settings as they appear in a config file."""

    timeout_s: float = Field(default=10.0, gt=0, description="Default read/write timeout")
    connect_timeout_s: float = Field(default=10.0, gt=0, description="Connect timeout")
    large_file_timeout_s: float = Field(
        default=LARGE_FILE_TIMEOUT_S, gt=0, description="Read/write timeout for large files"
    )
    follow_redirects: bool = True
    verify: bool | str = True
    user_agent: str = "rocketchat-rest/0.1"
    headers: dict[str, str] = Field(default_factory=dict)

    def to_client_config(self) -> HttpClientConfig:
        """Build the frozen transport configuration."""
        return HttpClientConfig(
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            follow_redirects=self.follow_redirects,
            verify=self.verify,
            user_agent=self.user_agent,
            headers=self.headers,
            large_file_timeout_s=self.large_file_timeout_s,
        )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    server_url: str | None = Field(default=None, description="Chat server base URL")
    http: HttpConfigSection = HttpConfigSection()
    logging: LoggingConfig = LoggingConfig()
