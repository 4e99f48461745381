"""Configuration management for backup inventory."""

from .config_manager import ConfigManager, ConnectionConfig
from .config_validator import ConfigValidator

__all__ = ["ConfigManager", "ConfigValidator", "ConnectionConfig"]
