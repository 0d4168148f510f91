"""Configuration manager for loading, saving, and managing application settings."""
import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Union, List, get_type_hints, get_origin, get_args
from dataclasses import asdict, is_dataclass

from .settings import ApplicationSettings
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _matches_type(value: Any, hint: Any) -> bool:
    """Check a decoded JSON value against a settings field annotation.

    JSON has no tuples, so tuple fields accept lists of the right length.
    """
    origin = get_origin(hint)
    args = get_args(hint)

    if origin is Union:
        return any(_matches_type(value, arg) for arg in args)
    if hint is type(None):
        return value is None
    if hint is Any:
        return True
    if origin is tuple:
        if not isinstance(value, (list, tuple)):
            return False
        if len(args) == 2 and args[1] is Ellipsis:
            return all(_matches_type(item, args[0]) for item in value)
        return len(value) == len(args) and all(
            _matches_type(item, arg) for item, arg in zip(value, args)
        )
    if origin is list:
        return isinstance(value, list) and all(_matches_type(item, args[0]) for item in value)
    if origin is dict:
        return isinstance(value, dict) and all(
            _matches_type(k, args[0]) and _matches_type(v, args[1]) for k, v in value.items()
        )
    if hint is bool:
        return isinstance(value, bool)
    if hint is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if hint is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, hint)


class ConfigManager:
    """Centralized configuration manager for orthopaths."""

    DEFAULT_CONFIG_PATHS = [
        "orthopaths.json",
        "config/orthopaths.json",
        "~/.orthopaths/config.json",
        "~/.config/orthopaths/config.json"
    ]

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file.
                        If None, the default locations are searched and
                        built-in defaults are used when nothing is found.
        """
        self.config_path: Optional[Path] = None
        self.settings: ApplicationSettings = ApplicationSettings()

        if config_path:
            self.config_path = Path(config_path).expanduser().resolve()
            if not self.config_path.exists():
                raise ConfigurationError(
                    f"Configuration file not found: {self.config_path}",
                    error_code="CONFIG_NOT_FOUND"
                )
        else:
            self.config_path = self._find_config_file()

        if self.config_path and self.config_path.exists():
            self.load()

    def _find_config_file(self) -> Optional[Path]:
        """Find existing configuration file in default locations."""
        for path_str in self.DEFAULT_CONFIG_PATHS:
            path = Path(path_str).expanduser().resolve()
            if path.exists():
                logger.info(f"Found existing config file: {path}")
                return path

        logger.debug("No config file found, using built-in defaults")
        return None

    def load(self, config_path: Optional[Union[str, Path]] = None) -> bool:
        """Load configuration from file.

        Args:
            config_path: Optional path to load from. Uses instance path if None.

        Returns:
            True if loaded successfully, False if the file does not exist.

        Raises:
            ConfigurationError: If the file is not valid JSON.
        """
        path = Path(config_path).expanduser().resolve() if config_path else self.config_path

        if not path or not path.exists():
            logger.warning(f"Configuration file not found: {path}")
            return False

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file {path}: {e}",
                error_code="CONFIG_PARSE",
                details={"path": str(path)}
            ) from e

        self._update_settings_from_dict(config_data)

        errors = self.validate()
        if any(error_list for error_list in errors.values()):
            logger.warning("Configuration validation errors found:")
            for category, error_list in errors.items():
                for error in error_list:
                    logger.warning(f"  {category}: {error}")

        logger.info(f"Configuration loaded from: {path}")
        return True

    def save(self, config_path: Optional[Union[str, Path]] = None) -> bool:
        """Save configuration to file.

        Args:
            config_path: Optional path to save to. Uses instance path if None.

        Returns:
            True if saved successfully, False otherwise.
        """
        path = Path(config_path).expanduser().resolve() if config_path else self.config_path

        if not path:
            logger.error("No configuration path specified")
            return False

        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            config_data = asdict(self.settings)

            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config_data, f, indent=2, ensure_ascii=False)

            self.config_path = path
            logger.info(f"Configuration saved to: {path}")
            return True

        except OSError as e:
            logger.error(f"Failed to save configuration to {path}: {e}")
            return False

    def _update_settings_from_dict(self, config_data: Dict[str, Any]):
        """Update settings from dictionary data.

        Raises:
            ConfigurationError: If a value does not match the setting's type.
        """
        def update_dataclass(obj, data, prefix):
            if not isinstance(data, dict):
                raise ConfigurationError(
                    f"Setting '{prefix or 'root'}' must be an object, got {type(data).__name__}",
                    error_code="CONFIG_TYPE",
                    details={"setting": prefix}
                )

            hints = get_type_hints(type(obj))
            for key, value in data.items():
                if not hasattr(obj, key):
                    logger.warning(f"Ignoring unknown setting: {key}")
                    continue
                name = f"{prefix}.{key}" if prefix else key
                attr = getattr(obj, key)
                if is_dataclass(attr):
                    update_dataclass(attr, value, name)
                    continue
                if key in hints and not _matches_type(value, hints[key]):
                    raise ConfigurationError(
                        f"Setting '{name}' has wrong type: {value!r}",
                        error_code="CONFIG_TYPE",
                        details={"setting": name, "value": value}
                    )
                setattr(obj, key, value)

        update_dataclass(self.settings, config_data, "")

    def get_settings(self) -> ApplicationSettings:
        """Get current application settings."""
        return self.settings

    def update_grid_settings(self, **kwargs):
        """Update grid settings."""
        self._update_category(self.settings.grid, "grid", kwargs)

    def update_routing_settings(self, **kwargs):
        """Update routing settings."""
        self._update_category(self.settings.routing, "routing", kwargs)

    def update_logging_settings(self, **kwargs):
        """Update logging settings."""
        self._update_category(self.settings.logging, "logging", kwargs)

    def _update_category(self, category, name: str, values: Dict[str, Any]):
        for key, value in values.items():
            if value is None:
                continue
            if hasattr(category, key):
                setattr(category, key, value)
            else:
                logger.warning(f"Unknown {name} setting: {key}")

    def validate(self) -> Dict[str, List[str]]:
        """Validate current settings."""
        return self.settings.validate()

    def require_valid(self):
        """Raise ConfigurationError if any setting is invalid."""
        errors = self.validate()
        messages = [f"{category}: {error}"
                    for category, error_list in errors.items()
                    for error in error_list]
        if messages:
            raise ConfigurationError(
                "Invalid configuration: " + "; ".join(messages),
                error_code="CONFIG_INVALID",
                details=errors
            )

    def reset_to_defaults(self):
        """Reset all settings to defaults."""
        self.settings = ApplicationSettings()
        logger.info("Settings reset to defaults")

    def get_config_info(self) -> Dict[str, Any]:
        """Get information about current configuration."""
        return {
            "config_path": str(self.config_path) if self.config_path else None,
            "config_exists": self.config_path.exists() if self.config_path else False,
            "version": self.settings.version,
            "config_version": self.settings.config_version,
            "validation_errors": self.validate()
        }


# Global configuration manager instance
_config_manager: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def initialize_config(config_path: Optional[Union[str, Path]] = None) -> ConfigManager:
    """Initialize the global configuration manager with optional custom path."""
    global _config_manager
    _config_manager = ConfigManager(config_path)
    return _config_manager
