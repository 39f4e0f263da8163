"""
Configuration Module

This module loads the QuickDate configuration from a YAML file and applies
environment variable overrides. The merged configuration is cached after the
first load.
"""

import os
from typing import Any, Dict, Optional

import yaml

from quickdate.utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_FILE_PATH = os.getenv("CONFIG_FILE_PATH", "config.yaml")

DEFAULT_WEEK_START = "mon"
DEFAULT_SERVER_NAME = "QuickDate MCP"

# accepted spellings of the first day of the week
_WEEK_STARTS = {
    "mon": "mon", "monday": "mon",
    "tue": "tue", "tuesday": "tue",
    "wed": "wed", "wednesday": "wed",
    "thu": "thu", "thursday": "thu",
    "fri": "fri", "friday": "fri",
    "sat": "sat", "saturday": "sat",
    "sun": "sun", "sunday": "sun",
}

_config_cache: Optional[Dict[str, Any]] = None


def load_yaml_config() -> Dict[str, Any]:
    """
    Load the raw YAML configuration file.

    Returns:
        Dict[str, Any]: The parsed YAML document, or an empty dict if the file
        does not exist or cannot be read.
    """
    if not os.path.exists(CONFIG_FILE_PATH):
        return {}

    try:
        with open(CONFIG_FILE_PATH, "r") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to read config file '{CONFIG_FILE_PATH}': {e}")
        return {}


def get_config() -> Dict[str, Any]:
    """
    Get the merged configuration.

    Values come from the ``quickdate`` and ``server`` sections of the YAML
    file; environment variables take precedence.

    Returns:
        Dict[str, Any]: The configuration dictionary.
    """
    global _config_cache

    if _config_cache is not None:
        return _config_cache

    yaml_config = load_yaml_config()
    engine = yaml_config.get("quickdate", {}) or {}
    server = yaml_config.get("server", {}) or {}

    _config_cache = {
        "timezone": os.getenv("QUICKDATE_TIMEZONE", engine.get("timezone")),
        "week_start": _week_start(os.getenv("QUICKDATE_WEEK_START") or engine.get("week_start")),
        "today": os.getenv("QUICKDATE_TODAY", engine.get("today")),
        "mcp_server_name": os.getenv("MCP_SERVER_NAME", server.get("name", DEFAULT_SERVER_NAME)),
    }
    return _config_cache


def _week_start(value: Any) -> str:
    """Normalise a configured week start to "mon".."sun", falling back to the default."""
    if not value:
        return DEFAULT_WEEK_START
    week_start = _WEEK_STARTS.get(str(value).strip().lower())
    if week_start is None:
        logger.warning(f"Unknown week start '{value}', using '{DEFAULT_WEEK_START}'")
        return DEFAULT_WEEK_START
    return week_start


def get_config_value(key: str, default: Any = None) -> Any:
    """
    Get a single configuration value.

    Args:
        key (str): The configuration key.
        default (Any, optional): Returned when the key is missing. Defaults to None.

    Returns:
        Any: The configured value or the default.
    """
    value = get_config().get(key)
    return default if value is None else value


def reset_config() -> None:
    """Drop the cached configuration so the next call reloads it."""
    global _config_cache
    _config_cache = None
