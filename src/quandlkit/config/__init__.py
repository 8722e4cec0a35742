"""Configuration for quandlkit: settings dataclasses and the ~/.quandlkitrc file."""

from .settings import Settings, ApiConfig, LoggingConfig, get_settings

__all__ = ['Settings', 'ApiConfig', 'LoggingConfig', 'get_settings']
