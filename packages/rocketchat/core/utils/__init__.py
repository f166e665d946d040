"""Shared utilities."""

from rocketchat.core.utils.logging import StructuredJSONFormatter, configure_logging

__all__ = ["StructuredJSONFormatter", "configure_logging"]
