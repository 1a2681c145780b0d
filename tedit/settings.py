"""User settings for the editor.

Settings are read from a JSON file in the OS-appropriate config
directory. Missing, unreadable or invalid entries fall back to defaults;
problems are logged and never stop the editor from starting.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

DEFAULT_SETTINGS: Dict[str, Any] = {
    'end_of_document_marker': EditorConstants.END_OF_DOCUMENT_MARKER,
    'show_status_bar': True,
    'log_level': EditorConstants.DEFAULT_LOG_LEVEL,
}


class EditorSettings:
    """Loads and validates the user's editor settings."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize settings.

        Args:
            config_dir: Directory holding the settings file. Defaults to
                the platform user config directory.
        """
        self._config_dir = config_dir or Path(
            platformdirs.user_config_dir(EditorConstants.APP_NAME, EditorConstants.APP_AUTHOR)
        )
        self._settings_file = self._config_dir / EditorConstants.SETTINGS_FILENAME
        self._settings_cache: Optional[Dict[str, Any]] = None

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _load_file(self) -> Dict[str, Any]:
        """Read the raw settings file.

        Returns:
            Parsed settings, or an empty dict if the file is missing or
            can't be read.
        """
        if not self._settings_file.exists():
            return {}

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def load(self) -> Dict[str, Any]:
        """Return the effective settings: defaults overlaid with valid user values."""
        if self._settings_cache is not None:
            return self._settings_cache

        settings = dict(DEFAULT_SETTINGS)
        for key, value in self._load_file().items():
            if key not in DEFAULT_SETTINGS:
                logger.warning(f"Unknown setting {key!r}, ignoring")
                continue
            if not self.validate_setting(key, value):
                logger.warning(f"Invalid value {value!r} for setting {key!r}, using default")
                continue
            settings[key] = value.upper() if key == 'log_level' else value

        self._settings_cache = settings
        return settings

    def get(self, key: str) -> Any:
        """Get a single effective setting value."""
        return self.load()[key]

    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.

        Args:
            key: Setting key name.
            value: Setting value to validate.

        Returns:
            True if setting is valid, False otherwise.
        """
        if key == 'end_of_document_marker':
            return isinstance(value, str) and len(value) > 0 and value.isprintable()
        if key == 'show_status_bar':
            return isinstance(value, bool)
        if key == 'log_level':
            return isinstance(value, str) and value.upper() in LOG_LEVELS
        return False

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None


# Global instance
_settings: Optional[EditorSettings] = None


def get_settings() -> EditorSettings:
    """Get the global settings instance.

    Returns:
        The shared EditorSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = EditorSettings()
    return _settings
