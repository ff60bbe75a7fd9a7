"""
LocaleLoader Runtime API

Adds locales outside the automatic injection, e.g. from plugin code:

    from localeloader.i18n import add_locale_string, add_locale_from_file

    add_locale_string("MyPlugin.Greeting", "Hello {name}!")
    add_locale_from_file(Path("extra/Locale/de.json"))

For bulk loading prefer the Locale/ folder of the plugin directory,
which is injected automatically after every locale switch.
"""

import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union, TYPE_CHECKING

from localeloader.i18n.injection import InjectionCoordinator, PluginLocaleIndex
from localeloader.i18n.loader import get_plugin_locale_files, load_all, load_document
from localeloader.i18n.manager import LocaleManager, get_locale_manager
from localeloader.i18n.merge import manager_store_provider
from localeloader.i18n.selection import select
from localeloader.models.locale_document import LocaleDocument
from localeloader.plugins.base import PluginManager
from localeloader.utils.constants import AUTHOR_SEPARATOR, FALLBACK_AUTHOR, RUNTIME_LOCALE
from localeloader.services.logger import get_logger

if TYPE_CHECKING:
    from localeloader.plugins.base import PluginInterface

logger = get_logger(__name__)


def split_authors(authors: Optional[str]) -> List[str]:
    """Split a "Name1, Name2" author string."""
    if not authors or not authors.strip():
        return []
    return [a.strip() for a in authors.split(AUTHOR_SEPARATOR) if a.strip()]


class LocaleLoaderAPI:
    """
    Runtime locale API.

    All writes go through the coordinator, so they never interleave
    with an automatic injection.
    """

    def __init__(
        self,
        coordinator: InjectionCoordinator,
        manager: Optional[LocaleManager] = None,
        default_authors: str = ""
    ):
        self._coordinator = coordinator
        self._manager = manager
        self._default_authors = default_authors

    @property
    def coordinator(self) -> InjectionCoordinator:
        return self._coordinator

    @property
    def plugin_index(self) -> PluginLocaleIndex:
        """Plugins known to ship locale files."""
        return self._coordinator.plugin_index

    def add_locale_string(
        self,
        raw_string: str,
        locale_string: str,
        force: bool = False,
        authors: Optional[str] = None
    ) -> int:
        """
        Add a single locale string.

        Args:
            raw_string: Locale key
            locale_string: Message text
            force: Overwrite an existing message
            authors: "Name1, Name2"; defaults to the configured authors

        Returns:
            1 if the message was written, 0 otherwise
        """
        final_authors = (
            split_authors(authors)
            or split_authors(self._default_authors)
            or [FALLBACK_AUTHOR]
        )

        document = LocaleDocument(
            locale_code=RUNTIME_LOCALE,
            authors=final_authors,
            messages={raw_string: locale_string},
        )
        return self._coordinator.merge_document(document, force)

    def add_locale_from_plugin(self, plugin: "PluginInterface", target: Optional[str] = None) -> int:
        """
        Add locales from a plugin's Locale/ folder.

        Args:
            plugin: Plugin handle
            target: When given, only files selected for this locale
                (with fallback) are added; otherwise all files are

        Returns:
            Number of messages written
        """
        files = get_plugin_locale_files(plugin, self._coordinator.locale_dir_name)
        if not files:
            return 0

        logger.debug(f"Adding locale for {plugin.info.id}")

        documents = load_all(files)
        if target:
            documents = select(documents, target, self._coordinator.fallback_language).selected

        total = sum(self._merge(document) for document in documents)

        self._coordinator.plugin_index.track(plugin)
        return total

    def add_locale_from_file(self, path: Union[str, Path]) -> int:
        """
        Add locale from a specific file.

        Returns:
            Number of messages written (0 if the file is unusable)
        """
        document = load_document(path)
        if document is None:
            return 0
        return self._merge(document)

    def _merge(self, document: LocaleDocument) -> int:
        logger.debug(f"- LocaleCode: {document.display_code}, Message Count: {len(document)}")
        return self._coordinator.merge_document(document, force=True)

    def get_formatted_locale_string(
        self,
        key: str,
        fmt: Optional[str] = None,
        arguments: Optional[Dict[str, Any]] = None,
        **kwargs
    ) -> str:
        """
        Format a stored message.

        Args:
            key: Locale key
            fmt: Optional outer format with one positional slot, e.g. "[{}]"
            arguments: Named arguments
            **kwargs: More named arguments, overriding `arguments`

        Returns:
            Formatted text; the key itself if the message is unknown
        """
        merged = dict(arguments or {})
        merged.update(kwargs)

        manager = self._manager or get_locale_manager()
        formatted = manager.format(key, merged)
        if formatted is None:
            return key

        if fmt and fmt.strip():
            formatted = fmt.format(formatted)
        return formatted


# Global instance
_api: Optional[LocaleLoaderAPI] = None
_api_lock = threading.Lock()


def get_api() -> LocaleLoaderAPI:
    """
    Get the process-wide API.

    Created on first use over the global LocaleManager and an empty
    plugin list unless the application installed its own with set_api().
    """
    global _api
    with _api_lock:
        if _api is None:
            manager = get_locale_manager()
            coordinator = InjectionCoordinator(PluginManager(), manager_store_provider(manager))
            _api = LocaleLoaderAPI(coordinator, manager)
        return _api


def set_api(api: Optional[LocaleLoaderAPI]) -> None:
    """Replace the process-wide API (None resets it)."""
    global _api
    with _api_lock:
        _api = api


def add_locale_string(raw_string: str, locale_string: str, force: bool = False, authors: Optional[str] = None) -> int:
    """Add a single locale string (shortcut)."""
    return get_api().add_locale_string(raw_string, locale_string, force, authors)


def add_locale_from_plugin(plugin: "PluginInterface", target: Optional[str] = None) -> int:
    """Add locales from a plugin's Locale/ folder (shortcut)."""
    return get_api().add_locale_from_plugin(plugin, target)


def add_locale_from_file(path: Union[str, Path]) -> int:
    """Add locale from a specific file (shortcut)."""
    return get_api().add_locale_from_file(path)


def get_formatted_locale_string(key: str, fmt: Optional[str] = None, arguments: Optional[Dict[str, Any]] = None, **kwargs) -> str:
    """Format a stored message (shortcut)."""
    return get_api().get_formatted_locale_string(key, fmt, arguments, **kwargs)


def t(key: str, **kwargs) -> str:
    """
    Translate text (shortcut).

    Example:
        t("Settings.my.plugin.General.Volume")
        t("MyPlugin.Greeting", name="Anna")
    """
    return get_formatted_locale_string(key, **kwargs)
