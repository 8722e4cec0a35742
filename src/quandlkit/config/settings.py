"""
Centralized configuration management for quandlkit.

This module provides configuration settings for:
- API access (key, response format, timeout, base URL)
- Logging configuration

Configuration priority (highest to lowest):
1. Explicit parameters (e.g., QuandlClient arguments)
2. Environment variables (QUANDL_API_KEY, QUANDLKIT_*)
3. User config file (~/.quandlkitrc)
4. Default values
"""

from dataclasses import dataclass, field
from typing import Optional
import os

DEFAULT_BASE_URL = "https://www.quandl.com"
DEFAULT_TIMEOUT = 5.0
DEFAULT_FORMAT = "object"


def _get_default_api_key() -> str:
    """
    Get the API key stored in the user config file.

    Returns:
        API key, or '' if none is configured
    """
    try:
        from quandlkit.config.user_config import get_configured_api_key
        return get_configured_api_key() or ''
    except Exception:
        # Fallback if user_config module fails
        return ''


@dataclass
class ApiConfig:
    """Quandl API access settings."""

    api_key: str = field(default_factory=lambda: _get_default_api_key())
    format: str = DEFAULT_FORMAT
    timeout: float = DEFAULT_TIMEOUT
    base_url: str = DEFAULT_BASE_URL


@dataclass
class LoggingConfig:
    """Logging configuration settings."""

    log_dir: str = "logs"
    log_level: str = "INFO"
    console_output: bool = True
    file_output: bool = False
    max_log_size_mb: int = 10
    backup_count: int = 5

    @property
    def max_bytes(self) -> int:
        """Get max log size in bytes."""
        return self.max_log_size_mb * 1_000_000


@dataclass
class Settings:
    """Main application settings."""

    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Environment
    environment: str = field(default_factory=lambda: os.getenv('QUANDLKIT_ENV', 'development'))

    @classmethod
    def load_from_env(cls) -> 'Settings':
        """
        Load settings from environment variables and user config.

        Environment variables:
            QUANDL_API_KEY: API key (overrides user config)
            QUANDLKIT_FORMAT: Response format (json, csv, object)
            QUANDLKIT_TIMEOUT: Request timeout in seconds
            QUANDLKIT_BASE_URL: API host, e.g. https://www.quandl.com
            QUANDLKIT_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
            QUANDLKIT_LOG_DIR: Log directory
            QUANDLKIT_ENV: Environment name (development, production, test)

        Returns:
            Settings instance configured from environment

        Raises:
            ValueError: If QUANDLKIT_TIMEOUT is not a number
        """
        settings = cls()

        # API settings
        if api_key := os.getenv('QUANDL_API_KEY'):
            settings.api.api_key = api_key

        if fmt := os.getenv('QUANDLKIT_FORMAT'):
            settings.api.format = fmt.lower()

        if timeout := os.getenv('QUANDLKIT_TIMEOUT'):
            settings.api.timeout = float(timeout)

        if base_url := os.getenv('QUANDLKIT_BASE_URL'):
            settings.api.base_url = base_url

        # Logging settings
        if log_level := os.getenv('QUANDLKIT_LOG_LEVEL'):
            settings.logging.log_level = log_level.upper()

        if log_dir := os.getenv('QUANDLKIT_LOG_DIR'):
            settings.logging.log_dir = log_dir

        return settings

    @classmethod
    def for_testing(cls) -> 'Settings':
        """
        Create settings optimized for testing.

        Returns:
            Settings instance for test environment
        """
        settings = cls(api=ApiConfig(api_key=''))
        settings.environment = 'test'
        settings.api.base_url = 'https://test.quandl.local'
        settings.logging.console_output = False
        settings.logging.file_output = False

        return settings


# Global settings instance
_settings: Optional[Settings] = None


def get_settings(reload: bool = False) -> Settings:
    """
    Get the global settings instance.

    Args:
        reload: Force reload settings from environment

    Returns:
        Global Settings instance
    """
    global _settings

    if _settings is None or reload:
        _settings = Settings.load_from_env()

    return _settings
