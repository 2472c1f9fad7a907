"""User configuration for the lined editor.

Settings live in a JSON file in the user's config directory and are read
once per process. A missing or broken file never stops the editor; bad
values are logged and replaced by defaults.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

logger = logging.getLogger(__name__)

APP_NAME = "lined"
LOG_LEVEL_ENV = "LINED_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    # Quit from Insert mode too, so 'q' can never be typed as text
    legacy_quit: bool = False
    log_level: str = "WARNING"


def validate_setting(key: str, value: Any) -> bool:
    """Validate a setting value.

    Args:
        key: Setting key name.
        value: Setting value to validate.

    Returns:
        True if setting is valid, False otherwise.
    """
    if key == 'legacy_quit':
        return isinstance(value, bool)
    if key == 'log_level':
        return isinstance(value, str) and value.upper() in LOG_LEVELS
    # Unknown settings are considered valid (forward compatibility)
    return True


class SettingsStore:
    """Reads settings from the user's config directory."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = config_dir or Path(platformdirs.user_config_dir(APP_NAME))
        self._settings_file = self._config_dir / "config.json"
        self._cache: Optional[Settings] = None

    def _read_raw(self) -> Dict[str, Any]:
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

    def load(self) -> Settings:
        """Load settings, applying the environment override for log level."""
        if self._cache is not None:
            return self._cache

        settings = Settings()
        known = {f.name for f in fields(Settings)}
        for key, value in self._read_raw().items():
            if key not in known:
                logger.info(f"Ignoring unknown setting {key!r}")
                continue
            if not validate_setting(key, value):
                logger.warning(f"Invalid value for {key!r}: {value!r}, using default")
                continue
            setattr(settings, key, value)

        env_level = os.environ.get(LOG_LEVEL_ENV)
        if env_level:
            if validate_setting('log_level', env_level):
                settings.log_level = env_level
            else:
                logger.warning(f"Ignoring {LOG_LEVEL_ENV}={env_level!r}")
        settings.log_level = settings.log_level.upper()

        self._cache = settings
        return settings


# Global instance
_store: Optional[SettingsStore] = None


def get_settings_store() -> SettingsStore:
    """Get the global settings store instance."""
    global _store
    if _store is None:
        _store = SettingsStore()
    return _store


def load_settings() -> Settings:
    return get_settings_store().load()
