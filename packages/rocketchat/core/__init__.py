"""Core REST client package."""

from rocketchat.core.client import RocketChatClient

__all__ = ["RocketChatClient"]
