"""
LocaleLoader Injection Coordinator

Merges the locale files of every loaded plugin into the live store
after the host switched locale.

A single lock serializes all injections and every store write, so
merges never interleave. Repeated triggers for the same target
within the dedup window are suppressed.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, List, Optional, Protocol, TYPE_CHECKING

from localeloader.i18n.loader import LoadReport, get_plugin_locale_files, load_all
from localeloader.i18n.matcher import normalize_locale
from localeloader.i18n.merge import LocaleStore, merge_into
from localeloader.i18n.selection import select
from localeloader.models.locale_document import LocaleDocument
from localeloader.utils.constants import (
    DEFAULT_LOCALE,
    DEDUP_WINDOW_MS,
    LOCALE_DIR_NAME,
    REFRESH_SENTINEL,
    InjectionStatus,
)
from localeloader.services.logger import get_logger, log_injection

if TYPE_CHECKING:
    from localeloader.plugins.base import PluginInterface
    from localeloader.services.settings_manager import LoaderSettings

logger = get_logger(__name__)

StoreProvider = Callable[[], Optional[LocaleStore]]
Clock = Callable[[], float]


class PluginSource(Protocol):
    """Anything that can enumerate the loaded plugins."""

    def get_all_plugins(self) -> List["PluginInterface"]:
        ...


@dataclass
class InjectionResult:
    """Outcome of one injection attempt."""
    target: str
    status: InjectionStatus
    plugin_count: int = 0
    message_count: int = 0
    fallback_plugins: List[str] = field(default_factory=list)
    failed_files: int = 0

    @property
    def injected(self) -> bool:
        return self.status is InjectionStatus.INJECTED

    def __str__(self) -> str:
        return (
            f"{self.target}: {self.status.value}, "
            f"{self.message_count} messages from {self.plugin_count} plugins"
        )


class PluginLocaleIndex:
    """
    Plugins known to ship locale files.

    Append-only; used for reporting.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._plugin_ids: set = set()

    def track(self, plugin: "PluginInterface") -> None:
        with self._lock:
            self._plugin_ids.add(plugin.info.id)

    def plugin_ids(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._plugin_ids)

    def __contains__(self, plugin_id: object) -> bool:
        with self._lock:
            return plugin_id in self._plugin_ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._plugin_ids)


class InjectionCoordinator:
    """
    Orchestrates plugin locale injection.

    One coordinator is meant to live for the whole process; tests
    construct their own.
    """

    def __init__(
        self,
        plugin_source: PluginSource,
        store_provider: StoreProvider,
        fallback_language: str = DEFAULT_LOCALE,
        dedup_window: float = DEDUP_WINDOW_MS / 1000.0,
        refresh_sentinel: str = REFRESH_SENTINEL,
        locale_dir_name: str = LOCALE_DIR_NAME,
        clock: Clock = time.monotonic,
        plugin_index: Optional[PluginLocaleIndex] = None,
    ):
        """
        Initialization.

        Args:
            plugin_source: Plugin enumeration (e.g. PluginManager)
            store_provider: Returns the destination store, or None if not ready
            fallback_language: Locale used when nothing matches the target
            dedup_window: Seconds in which a repeated target is suppressed
            refresh_sentinel: Target value meaning "reload", never injected
            locale_dir_name: Locale folder inside each plugin directory
            clock: Monotonic time source in seconds
            plugin_index: Shared plugin index (a new one by default)
        """
        self._plugin_source = plugin_source
        self._store_provider = store_provider
        self._fallback_language = fallback_language
        self._dedup_window = dedup_window
        self._refresh_sentinel = refresh_sentinel
        self._locale_dir_name = locale_dir_name
        self._clock = clock
        self._plugin_index = plugin_index if plugin_index is not None else PluginLocaleIndex()

        self._lock = threading.Lock()
        self._last_target: Optional[str] = None
        self._last_timestamp: float = 0.0

    @classmethod
    def from_settings(
        cls,
        plugin_source: PluginSource,
        store_provider: StoreProvider,
        settings: "LoaderSettings",
        **kwargs
    ) -> "InjectionCoordinator":
        """Create a coordinator configured by LoaderSettings."""
        return cls(
            plugin_source,
            store_provider,
            fallback_language=settings.fallback_language,
            dedup_window=settings.dedup_window,
            refresh_sentinel=settings.refresh_sentinel,
            locale_dir_name=settings.locale_dir_name,
            **kwargs
        )

    @property
    def plugin_index(self) -> PluginLocaleIndex:
        return self._plugin_index

    @property
    def fallback_language(self) -> str:
        return self._fallback_language

    @property
    def locale_dir_name(self) -> str:
        return self._locale_dir_name

    @property
    def last_target(self) -> Optional[str]:
        return self._last_target

    def is_refresh(self, target: Optional[str]) -> bool:
        """Check if a target is the refresh sentinel."""
        return target == self._refresh_sentinel

    def reset(self) -> None:
        """Forget the last injected target."""
        with self._lock:
            self._last_target = None
            self._last_timestamp = 0.0

    # =========================================================================
    # Injection
    # =========================================================================

    def inject(self, target: Optional[str]) -> InjectionResult:
        """
        Inject all plugin locales for a target locale.

        Blocks while another injection runs.

        Args:
            target: Locale code the host switched to (None means the
                fallback language, the refresh sentinel is ignored)

        Returns:
            InjectionResult with aggregate counts
        """
        if self.is_refresh(target):
            logger.debug(f"Skipping locale injection for refresh trigger (target: {target})")
            return InjectionResult(target, InjectionStatus.IGNORED)

        target = target or self._fallback_language

        with self._lock:
            now = self._clock()
            normalized = normalize_locale(target)

            if (
                normalized == self._last_target
                and now - self._last_timestamp < self._dedup_window
            ):
                logger.debug(f"Suppressing duplicate locale injection (target: {target})")
                return InjectionResult(target, InjectionStatus.SUPPRESSED)

            store = self._store_provider()
            if store is None:
                logger.warning("Locale store not available yet - skipping locale injection")
                return InjectionResult(target, InjectionStatus.STORE_UNAVAILABLE)

            self._last_target = normalized
            self._last_timestamp = now

            return self._inject_all(store, target)

    def _inject_all(self, store: LocaleStore, target: str) -> InjectionResult:
        result = InjectionResult(target, InjectionStatus.INJECTED)

        plugins = self._plugin_source.get_all_plugins()
        if not plugins:
            logger.debug("No plugins loaded - skipping locale injection")
            result.status = InjectionStatus.NO_PLUGINS
            return result

        for plugin in plugins:
            self._inject_plugin(store, plugin, target, result)

        if result.plugin_count > 0:
            log_injection(target, result.plugin_count, result.message_count)
        return result

    def _inject_plugin(
        self,
        store: LocaleStore,
        plugin: "PluginInterface",
        target: str,
        result: InjectionResult
    ) -> None:
        files = get_plugin_locale_files(plugin, self._locale_dir_name)
        if not files:
            return

        plugin_id = plugin.info.id
        logger.debug(f"Loading locales from {plugin_id}")
        self._plugin_index.track(plugin)

        report = LoadReport()
        candidates = load_all(files, report)
        result.failed_files += report.failed_count

        selected, used_fallback = select(candidates, target, self._fallback_language)
        if not selected:
            logger.debug(f"  {plugin_id}: no locale for {target}")
            return

        for document in selected:
            count = merge_into(store, document, force=True)
            result.message_count += count
            logger.debug(
                f"  - {document.source}: {document.display_code}, {count} messages"
                f"{' (fallback)' if used_fallback else ''}"
            )

        result.plugin_count += 1
        if used_fallback:
            result.fallback_plugins.append(plugin_id)

    # =========================================================================
    # Single documents
    # =========================================================================

    def merge_document(self, document: LocaleDocument, force: bool) -> int:
        """
        Merge one document into the current store under the lock.

        Args:
            document: Source document
            force: Overwrite existing values

        Returns:
            Number of keys processed (0 if skipped or the store is not ready)
        """
        with self._lock:
            return merge_into(self._store_provider(), document, force)
