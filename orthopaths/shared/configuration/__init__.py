"""Configuration management."""
from .config_manager import ConfigManager, get_config, initialize_config
from .settings import (
    GridSettings, RoutingSettings, DisplaySettings,
    LoggingSettings, ApplicationSettings, DEFAULT_PATH_COLORS
)

__all__ = [
    'ConfigManager', 'get_config', 'initialize_config',
    'GridSettings', 'RoutingSettings', 'DisplaySettings',
    'LoggingSettings', 'ApplicationSettings', 'DEFAULT_PATH_COLORS'
]
