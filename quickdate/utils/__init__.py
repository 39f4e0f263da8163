"""
QuickDate Utilities Module

Provides common utilities for logging and configuration.
"""

from quickdate.utils.logger import get_logger, setup_logger
from quickdate.utils.config import get_config, get_config_value, reset_config

__all__ = [
    'get_logger',
    'setup_logger',
    'get_config',
    'get_config_value',
    'reset_config',
]
