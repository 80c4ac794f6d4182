# src/html_grader/core/managers/config_manager.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from html_grader.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Loads application settings from a settings.json file and allows for
    in-memory modifications. Created explicitly and handed to whoever needs it.
    """

    def __init__(self, settings_path: Optional[Path] = None):
        self.settings_path = Path(settings_path) if settings_path else PathUtils.get_settings_file()
        self._config: Dict[str, Any] = {}
        self.reset()

    def get_all(self) -> Dict[str, Any]:
        """Returns the entire current configuration dictionary."""
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'http.timeout'.
        """
        value = self._config
        for key in key_path.split('.'):
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
        return value if value is not None else default

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Sets a nested value in the in-memory configuration, casting it to the
        type of the value it replaces when possible.
        """
        keys = key_path.split('.')
        d = self._config
        for key in keys[:-1]:
            d = d.setdefault(key, {})
            if not isinstance(d, dict):
                logger.error("Cannot set value: '%s' is not a dictionary.", key)
                return False

        original_value = d.get(keys[-1])
        if original_value is not None:
            try:
                value = type(original_value)(value)
            except (ValueError, TypeError):
                logger.warning(
                    "Could not cast new value for '%s' to type %s. Storing as given.",
                    key_path, type(original_value).__name__
                )

        d[keys[-1]] = value
        logger.debug("Configuration updated: %s = %s", key_path, value)
        return True

    def reset(self):
        """Reloads the in-memory configuration from the settings file."""
        if not self.settings_path.exists():
            logger.warning("settings.json not found at %s. Using empty config.", self.settings_path)
            self._config = {}
            return
        try:
            with open(self.settings_path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load %s: %s", self.settings_path, e, exc_info=True)
            self._config = {}
            return
        if not isinstance(loaded, dict):
            logger.error("%s does not hold a JSON object. Using empty config.", self.settings_path)
            loaded = {}
        self._config = loaded
        logger.debug("Configuration loaded from %s.", self.settings_path)
