"""
Logger Utility Module

This module provides functions for setting up and configuring the application logger.
"""

import os
import logging
import sys
import yaml
from pathlib import Path
from typing import Optional


def _server_config() -> dict:
    config_path = Path(os.getenv("CONFIG_FILE_PATH", "config.yaml"))
    if not config_path.exists():
        return {}
    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}
    return config.get("server", {}) or {}


def get_log_level() -> str:
    """
    Get the log level, from ``QUICKDATE_LOG_LEVEL`` or the ``server`` section
    of config.yaml.

    Returns:
        str: The log level (INFO by default).
    """
    env_level = os.getenv("QUICKDATE_LOG_LEVEL")
    if env_level:
        return env_level
    try:
        return _server_config().get("log_level", "INFO")
    except (OSError, yaml.YAMLError):
        return "INFO"


def get_log_file_path() -> Path:
    """
    Get the log file path from config or default.

    Returns:
        Path: The log file path.
    """
    try:
        log_path = _server_config().get("log_file")
        if log_path:
            return Path(log_path).expanduser()
    except (OSError, yaml.YAMLError):
        pass
    # Default to ~/.quickdate/quickdate.log
    default_path = Path.home() / ".quickdate" / "quickdate.log"
    default_path.parent.mkdir(parents=True, exist_ok=True)
    return default_path


def setup_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Set up and configure a logger.

    Args:
        name (Optional[str], optional): The name of the logger. Defaults to None.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name or "quickdate")

    # Avoid adding duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    log_level_str = get_log_level().upper()
    log_level = getattr(logging, log_level_str, logging.INFO)
    logger.setLevel(log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # MCP stdio transport owns stdout, so the console handler writes to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    try:
        log_file = get_log_file_path()
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError:
        logger.warning("Could not open log file, logging to console only")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The logger.
    """
    return logging.getLogger(name)
