"""Typed models for REST payloads."""

from rocketchat.core.models.errors import AuthenticationErrorMessage, ErrorMessage
from rocketchat.core.models.room import RoomType
from rocketchat.core.models.server import (
    ConfigurationsPayload,
    ServerInfo,
    Setting,
    SettingsOauth,
    SettingsPayload,
    Value,
)
from rocketchat.core.models.token import Token

__all__ = [
    "AuthenticationErrorMessage",
    "ConfigurationsPayload",
    "ErrorMessage",
    "RoomType",
    "ServerInfo",
    "Setting",
    "SettingsOauth",
    "SettingsPayload",
    "Token",
    "Value",
]
