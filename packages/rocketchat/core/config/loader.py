"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from rocketchat.core.config.models import AppConfig

logger = logging.getLogger(__name__)

SERVER_URL_ENV = "ROCKETCHAT_URL"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
                # safe_load returns None for empty files
                return content if content is not None else {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    A missing file yields the defaults. ``server_url`` falls back to the
    ROCKETCHAT_URL environment variable when the file does not set it.

    Args:
        path: Path to app config file (.json, .yaml, or .yml)

    Returns:
        Validated AppConfig

    Raises:
        ValidationError: If config is invalid
    """
    if path is not None and Path(path).exists():
        config = AppConfig.model_validate(load_config(path))
    else:
        if path is not None:
            logger.debug(f"Config file {path} not found, using defaults")
        config = AppConfig()

    if config.server_url is None:
        env_url = os.getenv(SERVER_URL_ENV)
        if env_url:
            logger.debug(f"Loaded {SERVER_URL_ENV} from environment")
            config = config.model_copy(update={"server_url": env_url})

    return config
