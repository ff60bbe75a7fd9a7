"""
LocaleLoader Plugin Registry

Plugin discovery and registration.
"""

from pathlib import Path
from typing import Optional, List

import json5

from localeloader.plugins.base import FolderPlugin, PluginInfo, PluginManager
from localeloader.services.logger import get_logger, log_plugin_registration

logger = get_logger(__name__)

MANIFEST_FILE_NAME = "plugin.json"


class PluginRegistry:
    """
    Plugin registry and loader.

    Every subdirectory of a plugin search path is a plugin. An optional
    plugin.json manifest supplies id, name, version and author.
    """

    def __init__(self, manager: PluginManager):
        """
        Initialization.

        Args:
            manager: PluginManager object
        """
        self.manager = manager
        self._plugin_paths: List[Path] = []

    def add_plugin_path(self, path: Path) -> None:
        """
        Add plugin search path.

        Args:
            path: Directory path
        """
        path = Path(path)
        if path.is_dir() and path not in self._plugin_paths:
            self._plugin_paths.append(path)

    @property
    def plugin_paths(self) -> List[Path]:
        return list(self._plugin_paths)

    def discover_plugins(self) -> List[Path]:
        """
        Discover plugins in all search paths.

        Returns:
            Plugin directories, sorted per search path
        """
        discovered = []

        for plugin_dir in self._plugin_paths:
            if not plugin_dir.exists():
                continue

            discovered.extend(
                subdir
                for subdir in sorted(plugin_dir.iterdir())
                if subdir.is_dir() and not subdir.name.startswith((".", "_"))
            )

        return discovered

    def _read_manifest(self, plugin_dir: Path) -> Optional[PluginInfo]:
        """
        Read plugin.json, if present.

        Returns:
            PluginInfo, or None when there is no usable manifest
        """
        manifest = plugin_dir / MANIFEST_FILE_NAME
        if not manifest.is_file():
            return None

        try:
            data = json5.loads(manifest.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Unreadable plugin manifest ({manifest}): {e}")
            return None

        if not isinstance(data, dict):
            return None

        return PluginInfo(
            id=str(data.get("id") or plugin_dir.name),
            name=str(data.get("name") or plugin_dir.name),
            version=str(data.get("version") or "0.0.0"),
            author=str(data.get("author") or ""),
            description=str(data.get("description") or ""),
        )

    def load_plugin_from_dir(self, plugin_dir: Path) -> FolderPlugin:
        """
        Create the plugin handle of a directory.

        Args:
            plugin_dir: Plugin directory

        Returns:
            Plugin object
        """
        return FolderPlugin(plugin_dir, self._read_manifest(plugin_dir))

    def load_all_plugins(self) -> int:
        """
        Load all discovered plugins.

        Returns:
            Number of successfully registered plugins
        """
        loaded = 0

        for plugin_dir in self.discover_plugins():
            plugin = self.load_plugin_from_dir(plugin_dir)

            if self.manager.register(plugin):
                loaded += 1
                log_plugin_registration(str(plugin.info))
            else:
                log_plugin_registration(plugin.info.id, error="duplicate id")

        return loaded
