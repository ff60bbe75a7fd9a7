"""
LocaleLoader Internationalization (i18n) Module

Merges plugin locale files into the host's live locale store.

Usage:
    from localeloader.i18n import (
        InjectionCoordinator, LocaleInjectionHook, LocaleManager,
        LocaleVariantDescriptor, manager_store_provider,
    )

    manager = LocaleManager(locales_dir)
    coordinator = InjectionCoordinator(plugin_manager, manager_store_provider(manager))
    LocaleInjectionHook(coordinator, manager).install()

    # Every variant load is followed by plugin locale injection
    manager.load_target_variant(LocaleVariantDescriptor("de-DE"))

Plugin usage:
    from localeloader.i18n import add_locale_string, t

    add_locale_string("MyPlugin.Greeting", "Hello {name}!")
    t("MyPlugin.Greeting", name="Anna")
"""

from localeloader.i18n.matcher import matches, normalize_locale, primary_language
from localeloader.i18n.loader import (
    LoadReport,
    LocaleFileError,
    LocaleReadError,
    LocaleParseError,
    InvalidLocaleDocument,
    get_plugin_locale_files,
    load_all,
    load_document,
    read_locale_document,
)
from localeloader.i18n.selection import SelectionResult, select
from localeloader.i18n.merge import (
    DictLocaleStore,
    LocaleManagerStore,
    LocaleStore,
    manager_store_provider,
    merge_into,
)
from localeloader.i18n.manager import (
    LocaleManager,
    LocaleVariantDescriptor,
    get_locale_manager,
    set_locale_manager,
)
from localeloader.i18n.injection import (
    InjectionCoordinator,
    InjectionResult,
    PluginLocaleIndex,
)
from localeloader.i18n.hook import LocaleInjectionHook, report_failures
from localeloader.i18n.api import (
    LocaleLoaderAPI,
    add_locale_from_file,
    add_locale_from_plugin,
    add_locale_string,
    get_api,
    get_formatted_locale_string,
    set_api,
    t,
)
from localeloader.i18n.config_locale import ConfigLocale, bind_localized

__all__ = [
    # Matching and selection
    "matches",
    "normalize_locale",
    "primary_language",
    "SelectionResult",
    "select",
    # Loading
    "LoadReport",
    "LocaleFileError",
    "LocaleReadError",
    "LocaleParseError",
    "InvalidLocaleDocument",
    "get_plugin_locale_files",
    "load_all",
    "load_document",
    "read_locale_document",
    # Merging
    "DictLocaleStore",
    "LocaleManagerStore",
    "LocaleStore",
    "manager_store_provider",
    "merge_into",
    # Store
    "LocaleManager",
    "LocaleVariantDescriptor",
    "get_locale_manager",
    "set_locale_manager",
    # Injection
    "InjectionCoordinator",
    "InjectionResult",
    "PluginLocaleIndex",
    "LocaleInjectionHook",
    "report_failures",
    # Runtime API
    "LocaleLoaderAPI",
    "add_locale_from_file",
    "add_locale_from_plugin",
    "add_locale_string",
    "get_api",
    "get_formatted_locale_string",
    "set_api",
    "t",
    # Config
    "ConfigLocale",
    "bind_localized",
]
