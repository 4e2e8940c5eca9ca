"""Configuration management for helmsafe."""

from .manager import ConfigManager, create_config_manager

__all__ = [
    "ConfigManager",
    "create_config_manager",
]
