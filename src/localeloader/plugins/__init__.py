"""
LocaleLoader Plugin System

Host-side plugin handles.

Each plugin is a directory; its Locale/ subfolder holds the locale
files merged by the injection coordinator.
"""

from localeloader.plugins.base import (
    FolderPlugin,
    PluginInfo,
    PluginInterface,
    PluginManager,
)
from localeloader.plugins.registry import PluginRegistry

__all__ = [
    "FolderPlugin",
    "PluginInfo",
    "PluginInterface",
    "PluginManager",
    "PluginRegistry",
]
