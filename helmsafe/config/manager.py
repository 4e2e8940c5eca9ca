"""Configuration manager for helmsafe."""

from typing import Dict, Any, Optional, Mapping
from pathlib import Path
import os

import yaml

from ..constants import (
    CONFIG_FILE, ENV_CONFIG_FILE, ENV_DEBUG,
    DEFAULT_HELM_BIN, DEFAULT_KUBECTL_BIN, DEFAULT_ENABLE_DEBUG
)
from ..errors import ConfigurationError
from ..utils.helpers import is_truthy
from ..utils.logging import logger

DEFAULTS: Dict[str, Any] = {
    "helm_bin": DEFAULT_HELM_BIN,
    "kubectl_bin": DEFAULT_KUBECTL_BIN,
    "enable_debug": DEFAULT_ENABLE_DEBUG,
}

STRING_KEYS = ["helm_bin", "kubectl_bin"]


class ConfigManager:
    """Loads the optional helm-safe configuration file.
    
    The file is read-only input; a missing file means built-in defaults.
    """
    
    def __init__(self, config_file: Optional[Path] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """Initialize the configuration manager.
        
        Args:
            config_file: Explicit configuration file path
            environ: Environment consulted for HELM_SAFE_CONFIG and HELM_SAFE_DEBUG
        """
        self.environ = os.environ if environ is None else environ
        if config_file is None:
            override = self.environ.get(ENV_CONFIG_FILE)
            config_file = Path(override).expanduser() if override else CONFIG_FILE
        self.config_file = config_file
        
        self._config: Optional[Dict[str, Any]] = None
    
    def initialize(self) -> None:
        """Load the configuration.
        
        Raises:
            ConfigurationError: The file exists but cannot be used
        """
        self._config = self._load_config()
        if is_truthy(self.environ.get(ENV_DEBUG)):
            self._config["enable_debug"] = True
    
    def _load_config(self) -> Dict[str, Any]:
        """Load and validate the configuration file."""
        config_data = dict(DEFAULTS)
        
        if not self.config_file.exists():
            logger.debug(f"No configuration file at {self.config_file}, using defaults")
            return config_data

        try:
            with open(self.config_file, 'r') as f:
                file_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML file {self.config_file}: {e}") from e
        except IOError as e:
            raise ConfigurationError(f"Could not read {self.config_file}: {e}") from e

        # An empty file is an empty mapping
        if file_data is None:
            file_data = {}
        if not isinstance(file_data, dict):
            raise ConfigurationError(f"{self.config_file} is not a valid YAML dictionary.")

        for key in STRING_KEYS:
            if key not in file_data:
                continue
            value = file_data[key]
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"'{key}' in {self.config_file} must be a non-empty string.")
            config_data[key] = value.strip()

        if "enable_debug" in file_data:
            enable_debug = file_data["enable_debug"]
            if not isinstance(enable_debug, bool):
                logger.warning(f"enable_debug in {self.config_file} must be true/false. Defaulting to false.")
                enable_debug = DEFAULT_ENABLE_DEBUG
            config_data["enable_debug"] = enable_debug

        for key in file_data:
            if key not in DEFAULTS:
                logger.debug(f"Ignoring unknown key '{key}' in {self.config_file}")

        logger.debug(f"Configuration loaded from {self.config_file}")
        return config_data

    @property
    def config(self) -> Dict[str, Any]:
        """Get the current configuration."""
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call initialize() first.")
        return self._config.copy()
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call initialize() first.")
        return self._config.get(key, default)
    
    def is_initialized(self) -> bool:
        """Check if the configuration has been initialized."""
        return self._config is not None


def create_config_manager(config_file: Optional[Path] = None,
                          environ: Optional[Mapping[str, str]] = None) -> ConfigManager:
    """Create and initialize a configuration manager.
    
    Args:
        config_file: Explicit configuration file path
        environ: Environment to read overrides from
        
    Returns:
        Initialized ConfigManager instance
    """
    manager = ConfigManager(config_file, environ)
    manager.initialize()
    return manager
