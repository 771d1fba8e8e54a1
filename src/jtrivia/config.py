"""
Centralized configuration handler for jtrivia.

Loads the JSON settings file and merges it over the built-in defaults so
every section the rest of the package reads is always present.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import DEFAULT_PATHS, DEFAULT_SETTINGS
from .errors import ConfigError


class TriviaConfig:
    """
    Settings for the question source and logging.

    A missing settings file is not an error: the defaults are used as-is.
    A file that exists but cannot be parsed raises ``ConfigError``.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration handler.

        Args:
            config_path: Path to the JSON settings file
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = config_path or DEFAULT_PATHS['config_file']
        self.settings = self._load_settings()

    def _load_settings(self) -> Dict[str, Any]:
        """
        Load settings from the configuration file and merge them over defaults.

        Returns:
            Dictionary with 'source' and 'logging' sections

        Raises:
            ConfigError: If the file is unreadable, not valid JSON, or not an object
        """
        settings = copy.deepcopy(DEFAULT_SETTINGS)
        settings_path = Path(self.config_path)

        if not settings_path.exists():
            self.logger.debug(f"No settings file at {self.config_path}, using defaults")
            return settings

        try:
            with open(settings_path, 'r', encoding='utf-8') as f:
                user_settings = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to load settings from {self.config_path}: {e}") from e

        if not isinstance(user_settings, dict):
            raise ConfigError(f"Settings file {self.config_path} must contain a JSON object")

        for section, values in user_settings.items():
            if isinstance(values, dict) and isinstance(settings.get(section), dict):
                settings[section].update(values)
            else:
                settings[section] = values

        self._validate_settings(settings)
        self.logger.debug(f"Loaded settings from {self.config_path}")
        return settings

    def _validate_settings(self, settings: Dict[str, Any]) -> None:
        """
        Check that every setting the package reads has a usable type.

        Raises:
            ConfigError: Naming the first setting that is wrong
        """
        for section in DEFAULT_SETTINGS:
            if not isinstance(settings.get(section), dict):
                raise ConfigError(f"Section '{section}' in {self.config_path} must be an object")

        source = settings['source']
        if not isinstance(source.get('endpoint'), str) or not source['endpoint']:
            raise ConfigError(f"source.endpoint in {self.config_path} must be a non-empty string")

        timeout = source.get('timeout')
        if timeout is not None and (isinstance(timeout, bool)
                                    or not isinstance(timeout, (int, float))
                                    or timeout <= 0):
            raise ConfigError(f"source.timeout in {self.config_path} must be null or a positive number")

        logging_settings = settings['logging']
        for key in ('level', 'console_level', 'file'):
            if not isinstance(logging_settings.get(key), str) or not logging_settings[key]:
                raise ConfigError(f"logging.{key} in {self.config_path} must be a non-empty string")

        for key in ('max_size', 'backup_count'):
            value = logging_settings.get(key)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"logging.{key} in {self.config_path} must be a non-negative integer")

    @property
    def endpoint(self) -> str:
        return self.settings['source']['endpoint']

    @property
    def timeout(self) -> Optional[float]:
        return self.settings['source'].get('timeout')

    @property
    def logging_settings(self) -> Dict[str, Any]:
        return self.settings['logging']
