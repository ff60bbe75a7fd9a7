"""
LocaleLoader Settings Manager

Loader settings management.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field, asdict, fields

from PySide6.QtCore import QStandardPaths

from localeloader.utils.constants import (
    DEFAULT_LOCALE,
    DEDUP_WINDOW_MS,
    LOCALE_DIR_NAME,
    REFRESH_SENTINEL,
    STARTUP_DELAY_MS,
)
from localeloader.services.logger import get_logger

logger = get_logger(__name__)

SETTINGS_FILE_NAME = "settings.json"


@dataclass
class LoaderSettings:
    """Loader settings."""
    # Locale selection
    fallback_language: str = DEFAULT_LOCALE
    locale_dir_name: str = LOCALE_DIR_NAME

    # Injection
    dedup_window_ms: int = DEDUP_WINDOW_MS
    refresh_sentinel: str = REFRESH_SENTINEL
    startup_delay_ms: int = STARTUP_DELAY_MS

    # Runtime API
    default_authors: str = ""  # comma separated, e.g. "Alice, Bob"

    # Logging
    debug_logging: bool = False

    # Plugins
    plugin_paths: List[str] = field(default_factory=list)
    plugin_settings: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @property
    def dedup_window(self) -> float:
        """Dedup window in seconds."""
        return self.dedup_window_ms / 1000.0


class SettingsManager:
    """
    Settings manager.

    Central place for managing loader settings. Settings live in
    settings.json inside the application data directory.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        self._settings = LoaderSettings()
        self._config_dir = config_dir or self._get_config_dir()
        self._config_dir.mkdir(parents=True, exist_ok=True)
        self._settings_file = self._config_dir / SETTINGS_FILE_NAME

        self._load_settings()

    def _get_config_dir(self) -> Path:
        """Get configuration directory."""
        return Path(QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.AppDataLocation
        ))

    @property
    def config_dir(self) -> Path:
        """Configuration directory."""
        return self._config_dir

    @property
    def settings(self) -> LoaderSettings:
        """The underlying settings object."""
        return self._settings

    def _load_settings(self) -> None:
        """Load settings."""
        if not self._settings_file.exists():
            return

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading settings: {e}")
            return

        known = {f.name for f in fields(LoaderSettings)}
        for key, value in data.items():
            if key in known:
                setattr(self._settings, key, value)
            else:
                logger.debug(f"Ignoring unknown setting: {key}")

    def save_settings(self) -> None:
        """Save settings."""
        try:
            with open(self._settings_file, 'w', encoding='utf-8') as f:
                json.dump(asdict(self._settings), f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Error saving settings: {e}")

    # Getters and setters

    @property
    def fallback_language(self) -> str:
        return self._settings.fallback_language

    @fallback_language.setter
    def fallback_language(self, value: str) -> None:
        self._settings.fallback_language = value

    @property
    def dedup_window_ms(self) -> int:
        return self._settings.dedup_window_ms

    @dedup_window_ms.setter
    def dedup_window_ms(self, value: int) -> None:
        self._settings.dedup_window_ms = value

    @property
    def default_authors(self) -> str:
        return self._settings.default_authors

    @default_authors.setter
    def default_authors(self, value: str) -> None:
        self._settings.default_authors = value

    @property
    def debug_logging(self) -> bool:
        return self._settings.debug_logging

    @debug_logging.setter
    def debug_logging(self, value: bool) -> None:
        self._settings.debug_logging = value

    @property
    def plugin_paths(self) -> List[Path]:
        return [Path(p) for p in self._settings.plugin_paths]

    def get(self, key: str, default: Any = None) -> Any:
        """
        General setting retrieval by key.

        Args:
            key: The name of the setting (e.g., 'fallback_language')
            default: Default value if it does not exist

        Returns:
            The value of the setting or the default
        """
        return getattr(self._settings, key, default)

    def set(self, key: str, value: Any) -> None:
        """
        General setting by key.

        Raises:
            KeyError: if the setting does not exist
        """
        if not hasattr(self._settings, key):
            raise KeyError(key)
        setattr(self._settings, key, value)

    def get_plugin_settings(self, plugin_id: str) -> Dict[str, Any]:
        """Get plugin settings."""
        return self._settings.plugin_settings.get(plugin_id, {})

    def set_plugin_setting(self, plugin_id: str, key: str, value: Any) -> None:
        """Set a single plugin setting."""
        self._settings.plugin_settings.setdefault(plugin_id, {})[key] = value


# Global instance
_settings_manager: Optional[SettingsManager] = None


def get_settings_manager() -> SettingsManager:
    """Get the process-wide SettingsManager, creating it on first use."""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager


def set_settings_manager(manager: Optional[SettingsManager]) -> None:
    """Replace the process-wide SettingsManager (None resets it)."""
    global _settings_manager
    _settings_manager = manager
