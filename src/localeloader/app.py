"""
LocaleLoader Application

Wires the host collaborators to the injection core.
"""

from concurrent.futures import Future
from pathlib import Path
from typing import Iterable, Optional

from PySide6.QtCore import QCoreApplication, QTimer

from localeloader.i18n.api import LocaleLoaderAPI, set_api
from localeloader.i18n.hook import LocaleInjectionHook, report_failures
from localeloader.i18n.injection import InjectionCoordinator
from localeloader.i18n.manager import LocaleManager, LocaleVariantDescriptor, set_locale_manager
from localeloader.i18n.merge import manager_store_provider
from localeloader.i18n.ui_support import LocaleSignals, get_locale_signals
from localeloader.plugins.base import PluginManager
from localeloader.plugins.registry import PluginRegistry
from localeloader.services.crash_handler import log_activity
from localeloader.services.logger import get_logger
from localeloader.services.settings_manager import SettingsManager

logger = get_logger(__name__)


class LocaleLoaderApp:
    """
    Application object.

    Owns the plugin manager, the host locale store, the injection
    coordinator and the hook between them.
    """

    def __init__(
        self,
        settings: SettingsManager,
        locales_dir: Optional[Path] = None,
        plugin_paths: Iterable[Path] = (),
        signals: Optional[LocaleSignals] = None
    ):
        self.settings = settings
        self.signals = signals if signals is not None else get_locale_signals()

        self.plugin_manager = PluginManager()
        self.registry = PluginRegistry(self.plugin_manager)
        for path in [*settings.plugin_paths, *plugin_paths]:
            self.registry.add_plugin_path(Path(path))

        self.locale_manager = LocaleManager(locales_dir)
        self.coordinator = InjectionCoordinator.from_settings(
            self.plugin_manager,
            manager_store_provider(self.locale_manager),
            settings.settings,
        )
        self.api = LocaleLoaderAPI(
            self.coordinator, self.locale_manager, settings.default_authors
        )
        self.hook = LocaleInjectionHook(self.coordinator, self.locale_manager, self.signals)

    def start(self) -> int:
        """
        Load plugins and install the injection hook.

        When a Qt application exists the startup injection is
        scheduled as well.

        Returns:
            Number of loaded plugins
        """
        loaded = self.registry.load_all_plugins()
        logger.info(f"{loaded} plugins loaded")

        self.hook.install()
        set_locale_manager(self.locale_manager)
        set_api(self.api)

        if QCoreApplication.instance() is not None:
            self.schedule_startup_injection()

        log_activity("LocaleLoader started", f"{loaded} plugins")
        return loaded

    def switch_locale(self, locale_code: Optional[str]) -> Future:
        """
        Ask the host to load a locale variant.

        Plugin locales are injected by the hook once it completes.
        """
        variant = LocaleVariantDescriptor(locale_code) if locale_code else None
        logger.info(f"Switching locale: {variant or self.coordinator.fallback_language}")
        return self.locale_manager.load_target_variant(variant)

    def schedule_startup_injection(self) -> None:
        """Add all plugin locales once the Qt event loop has settled."""
        delay = self.settings.get("startup_delay_ms")
        logger.debug(f"Startup injection in {delay} ms")
        QTimer.singleShot(delay, self.inject_all_plugins)

    @report_failures
    def inject_all_plugins(self) -> int:
        """
        Add the locales of every loaded plugin for the active language.

        Returns:
            Number of messages written
        """
        plugins = self.plugin_manager.get_all_plugins()
        if not plugins:
            return 0

        target = self.locale_manager.current_language
        total = sum(self.api.add_locale_from_plugin(p, target) for p in plugins)
        logger.info(f"Startup injection: {total} messages from {len(self.coordinator.plugin_index)} plugins")
        return total

    def shutdown(self) -> None:
        """Uninstall the hook and stop the workers."""
        self.hook.uninstall()
        self.locale_manager.shutdown()
        self.plugin_manager.shutdown_all()
        set_api(None)
        set_locale_manager(None)
        log_activity("LocaleLoader stopped")
