"""Async REST client for Rocket.Chat servers."""

__version__ = "0.1.0"
