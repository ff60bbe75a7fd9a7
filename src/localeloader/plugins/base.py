"""
LocaleLoader Plugin Base

Plugin handles as seen by the locale loader.

The loader only needs an identity and a directory for each plugin;
everything else about a plugin belongs to the host.
"""


from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, List, Dict, Any


@dataclass
class PluginInfo:
    """
    Plugin metadata.
    """
    id: str                     # Unique identifier (GUID)
    name: str                   # Display name
    version: str = "0.0.0"      # Version (e.g., "1.0.0")
    author: str = ""            # Author(s)
    description: str = ""       # Short description

    def __str__(self) -> str:
        if self.author:
            return f"{self.name} v{self.version} by {self.author}"
        return f"{self.name} v{self.version}"


class PluginInterface(ABC):
    """
    Plugin interface.

    Every plugin handle must implement this interface.
    """

    _plugin_dir: Optional[Path] = None  # Plugin directory path

    @property
    @abstractmethod
    def info(self) -> PluginInfo:
        """
        Plugin information.

        Returns:
            PluginInfo object
        """
        pass

    @property
    def plugin_dir(self) -> Optional[Path]:
        """Directory the plugin was loaded from."""
        return self._plugin_dir

    def initialize(self) -> bool:
        """
        Plugin initialization.

        Returns False to prevent the plugin from registering.
        """
        return True

    def shutdown(self) -> None:
        """
        Plugin shutdown.

        Called when the host is closing.
        """
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.info.id}>"


class FolderPlugin(PluginInterface):
    """
    Plugin living in its own directory.

    Used for plugins discovered on disk, where the directory name
    doubles as the identifier unless a manifest says otherwise.
    """

    def __init__(self, plugin_dir: Path, info: Optional[PluginInfo] = None):
        self._plugin_dir = Path(plugin_dir)
        self._info = info or PluginInfo(id=self._plugin_dir.name, name=self._plugin_dir.name)

    @property
    def info(self) -> PluginInfo:
        return self._info


class PluginManager:
    """
    Plugin manager.

    Keeps the loaded plugins of the host.
    """

    def __init__(self):
        self._plugins: Dict[str, PluginInterface] = {}
        self._enabled_plugins: set = set()
        self._plugin_settings: Dict[str, Dict[str, Any]] = {}

    def register(self, plugin: PluginInterface, enabled: bool = True) -> bool:
        """
        Register plugin.

        Args:
            plugin: Plugin object
            enabled: Enabled by default

        Returns:
            True if successful
        """
        info = plugin.info

        if info.id in self._plugins:
            return False

        if not plugin.initialize():
            return False

        self._plugins[info.id] = plugin

        if enabled:
            self._enabled_plugins.add(info.id)

        return True

    def unregister(self, plugin_id: str) -> bool:
        """
        Unregister plugin.

        Args:
            plugin_id: Plugin identifier

        Returns:
            True if successful
        """
        if plugin_id not in self._plugins:
            return False

        plugin = self._plugins.pop(plugin_id)
        plugin.shutdown()
        self._enabled_plugins.discard(plugin_id)

        return True

    def enable_plugin(self, plugin_id: str) -> bool:
        """Enable plugin."""
        if plugin_id in self._plugins:
            self._enabled_plugins.add(plugin_id)
            return True
        return False

    def disable_plugin(self, plugin_id: str) -> bool:
        """Disable plugin."""
        self._enabled_plugins.discard(plugin_id)
        return True

    def is_enabled(self, plugin_id: str) -> bool:
        """Check if plugin is enabled."""
        return plugin_id in self._enabled_plugins

    def get_plugin(self, plugin_id: str) -> Optional[PluginInterface]:
        """Get plugin by identifier."""
        return self._plugins.get(plugin_id)

    def get_all_plugins(self) -> List[PluginInterface]:
        """Get all plugins, in registration order."""
        return list(self._plugins.values())

    def get_enabled_plugins(self) -> List[PluginInterface]:
        """Get enabled plugins, in registration order."""
        return [p for pid, p in self._plugins.items() if pid in self._enabled_plugins]

    def save_plugin_settings(self, plugin_id: str, settings: Dict[str, Any]) -> None:
        """Save plugin settings."""
        self._plugin_settings[plugin_id] = settings

    def get_plugin_settings(self, plugin_id: str) -> Dict[str, Any]:
        """Get plugin settings."""
        return self._plugin_settings.get(plugin_id, {})

    def shutdown_all(self) -> None:
        """Shutdown all plugins."""
        for plugin in self._plugins.values():
            plugin.shutdown()

        self._plugins.clear()
        self._enabled_plugins.clear()

    def __len__(self) -> int:
        return len(self._plugins)
