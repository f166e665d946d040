"""Configuration management for the REST client."""

from rocketchat.core.config.loader import detect_format, load_app_config, load_config
from rocketchat.core.config.models import AppConfig, HttpConfigSection, LoggingConfig

__all__ = [
    "AppConfig",
    "HttpConfigSection",
    "LoggingConfig",
    "detect_format",
    "load_app_config",
    "load_config",
]
