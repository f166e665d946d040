"""Response models for the server-level REST endpoints.

Server info, service configurations, oauth settings and public settings.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ServerInfo(BaseModel):
    """Server information from ``GET /api/info``."""

    model_config = ConfigDict(extra="ignore")

    version: str = Field(description="Server version string (e.g. '6.4.0')")
    success: bool | None = Field(default=None, description="API success flag")


class ConfigurationsPayload(BaseModel):
    """Raw payload from ``service.configurations``.

    Each entry is a flat mapping with a ``service`` key plus arbitrary
    string-valued fields.
    """

    model_config = ConfigDict(extra="ignore")

    configurations: list[dict[str, str]] = Field(default_factory=list)

    @field_validator("configurations", mode="before")
    @classmethod
    def stringify_values(cls, v: Any) -> Any:
        """Render scalar field values (booleans, numbers) as strings; drop nulls."""
        if not isinstance(v, list):
            return v
        result = []
        for entry in v:
            if not isinstance(entry, dict):
                result.append(entry)
                continue
            result.append(
                {
                    key: json.dumps(value) if isinstance(value, bool | int | float) else value
                    for key, value in entry.items()
                    if value is not None
                }
            )
        return result

    def by_service(self) -> dict[str, dict[str, str]]:
        """Group configuration entries by service name.

        Entries without a ``service`` key are dropped. The ``service`` key is
        removed from the returned field mappings.

        Returns:
            Mapping of service name to its remaining fields
        """
        result: dict[str, dict[str, str]] = {}
        for entry in self.configurations:
            service = entry.get("service")
            if service is None:
                continue
            result[service] = {k: v for k, v in entry.items() if k != "service"}
        return result


class SettingsOauth(BaseModel):
    """Available oauth services from ``settings.oauth``."""

    model_config = ConfigDict(extra="ignore")

    services: list[dict[str, Any]] = Field(default_factory=list)


class Value(BaseModel):
    """A typed public setting value."""

    model_config = ConfigDict(frozen=True)

    value: Any = None
    type: str | None = Field(default=None, description="Setting type (boolean, string, int...)")


class Setting(BaseModel):
    """Single entry of the ``settings.public`` list."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(alias="_id")
    type: str | None = None
    value: Any = None


class SettingsPayload(BaseModel):
    """Raw payload from ``settings.public``."""

    model_config = ConfigDict(extra="ignore")

    settings: list[Setting] = Field(default_factory=list)
    count: int | None = None
    total: int | None = None

    def as_map(self) -> dict[str, Value]:
        """Return the settings keyed by setting id."""
        return {s.id: Value(value=s.value, type=s.type) for s in self.settings}
