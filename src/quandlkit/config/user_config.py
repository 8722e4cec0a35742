"""
User configuration management for quandlkit.

Manages persistent user configuration stored in ~/.quandlkitrc (YAML format),
mainly the API key so it does not have to be passed in code.
"""

import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from quandlkit.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".quandlkitrc"


class UserConfig:
    """Manages user configuration in ~/.quandlkitrc (YAML format)."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize user configuration.

        Args:
            config_path: Path to config file (defaults to ~/.quandlkitrc)
        """
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config = self._load()

    def _load(self) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Returns:
            Dict containing configuration, or empty dict if file doesn't exist
            or cannot be parsed
        """
        if not self.config_path.exists():
            logger.debug(f"Config file not found at {self.config_path}, using defaults")
            return {}

        try:
            with open(self.config_path, 'r') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config file {self.config_path}: {e}")
            return {}
        except OSError as e:
            logger.error(f"Failed to read config file {self.config_path}: {e}")
            return {}

        if config is None:
            logger.warning(f"Config file {self.config_path} is empty")
            return {}
        if not isinstance(config, dict):
            logger.error(f"Config file {self.config_path} must contain a mapping")
            return {}

        logger.debug(f"Loaded config from {self.config_path}")
        return config

    def _save(self) -> None:
        """Save configuration to YAML file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, 'w') as f:
                yaml.safe_dump(
                    self._config,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    indent=2
                )
            logger.info(f"Saved config to {self.config_path}")
        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            raise

    def get_api_key(self) -> Optional[str]:
        """
        Get the API key from configuration.

        Returns:
            API key string, or None if not configured
        """
        api_key = self.get('api.key')
        if api_key:
            return str(api_key)
        return None

    def set_api_key(self, api_key: str) -> None:
        """
        Store the API key in configuration.

        Args:
            api_key: Quandl API key
        """
        self.set('api.key', api_key)

    def get_all(self) -> Dict[str, Any]:
        """
        Get all configuration.

        Returns:
            Dict containing all configuration
        """
        return self._config.copy()

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (supports nested keys with dots, e.g. 'api.key')
            value: Configuration value
        """
        keys = key.split('.')
        current = self._config

        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                current[k] = {}
            current = current[k]

        current[keys[-1]] = value
        self._save()
        logger.info(f"Set config {key}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (supports nested keys with dots, e.g. 'api.timeout')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split('.')
        current = self._config

        try:
            for k in keys:
                current = current[k]
            return current
        except (KeyError, TypeError):
            return default


def get_configured_api_key(config_path: Optional[Path] = None) -> Optional[str]:
    """
    Get the API key stored in the user config file.

    Args:
        config_path: Optional config file path (defaults to ~/.quandlkitrc)

    Returns:
        API key, or None if not configured
    """
    return UserConfig(config_path).get_api_key()
