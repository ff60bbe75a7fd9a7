"""
LocaleLoader Locale Manager

The host's live locale store.

Holds the messages of the active locale variant. Loading a variant
runs on a worker thread and returns a Future; listeners registered
with add_variant_listener() receive every such Future, which is how
plugin locales get injected after the host finished its own load.
"""


import contextlib
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any, List, Callable

from localeloader.i18n.loader import get_locale_files, load_document
from localeloader.i18n.matcher import normalize_locale, primary_language
from localeloader.models.locale_document import LocaleDocument
from localeloader.utils.constants import DEFAULT_LOCALE, REFRESH_SENTINEL
from localeloader.services.logger import get_logger

logger = get_logger(__name__)

VariantListener = Callable[[Future, Optional["LocaleVariantDescriptor"]], None]


@dataclass(frozen=True)
class LocaleVariantDescriptor:
    """Locale variant requested from the host."""
    locale_code: Optional[str]

    def __str__(self) -> str:
        return self.locale_code or ""


class LocaleManager:
    """
    Central locale store of the host.

    Messages are flat {key: text} pairs of the active variant.
    """

    FALLBACK_LANGUAGE = DEFAULT_LOCALE

    def __init__(self, locales_dir: Optional[Path] = None, max_workers: int = 1):
        """
        Initialization.

        Args:
            locales_dir: Directory of the host's own locale files (optional)
            max_workers: Worker threads for variant loading
        """
        self._locales_dir = locales_dir
        self._lock = threading.RLock()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="locale-variant"
        )

        # Active variant
        self._locale_code: str = self.FALLBACK_LANGUAGE
        self._messages: Optional[Dict[str, str]] = None

        self._variant_listeners: List[VariantListener] = []

    # =========================================================================
    # Variant loading
    # =========================================================================

    def add_variant_listener(self, listener: VariantListener) -> None:
        """Register a listener receiving every variant load Future."""
        if listener not in self._variant_listeners:
            self._variant_listeners.append(listener)

    def remove_variant_listener(self, listener: VariantListener) -> None:
        """Unregister a variant listener."""
        if listener in self._variant_listeners:
            self._variant_listeners.remove(listener)

    def load_target_variant(self, variant: Optional[LocaleVariantDescriptor] = None) -> Future:
        """
        Load a locale variant in the background.

        Args:
            variant: Requested variant; None loads the fallback language,
                locale code "-" reloads the active variant

        Returns:
            Future completing when the host messages are in place
        """
        future = self._executor.submit(self._load_variant, variant)

        for listener in list(self._variant_listeners):
            listener(future, variant)

        return future

    def _load_variant(self, variant: Optional[LocaleVariantDescriptor]) -> str:
        code = (variant.locale_code if variant else None) or self.FALLBACK_LANGUAGE
        if code == REFRESH_SENTINEL:
            code = self._locale_code

        messages: Dict[str, str] = {}
        for document in self._host_documents(code):
            messages.update(document.messages)

        with self._lock:
            self._locale_code = code
            self._messages = messages

        logger.info(f"Locale variant loaded: {code} ({len(messages)} host messages)")
        return code

    def _host_documents(self, code: str) -> List[LocaleDocument]:
        """Host files in merge order: fallback, primary language, exact code."""
        if self._locales_dir is None:
            return []

        wanted = [self.FALLBACK_LANGUAGE, primary_language(code), normalize_locale(code)]
        order = list(dict.fromkeys(wanted))

        files = {p.stem.lower(): p for p in get_locale_files(self._locales_dir)}
        documents = []
        for name in order:
            if name in files:
                document = load_document(files[name])
                if document is not None:
                    documents.append(document)
        return documents

    def shutdown(self) -> None:
        """Stop the variant loader thread."""
        self._executor.shutdown(wait=True)

    # =========================================================================
    # Store access
    # =========================================================================

    @property
    def is_loaded(self) -> bool:
        """True once a variant finished loading."""
        with self._lock:
            return self._messages is not None

    @property
    def current_language(self) -> str:
        """Active locale code."""
        return self._locale_code

    @property
    def messages(self) -> Dict[str, str]:
        """Copy of the active messages."""
        with self._lock:
            return dict(self._messages or {})

    def has_message(self, key: str) -> bool:
        """Check if the active variant has the key."""
        with self._lock:
            return self._messages is not None and key in self._messages

    def get_message(self, key: str) -> Optional[str]:
        """Raw message, or None."""
        with self._lock:
            if self._messages is None:
                return None
            return self._messages.get(key)

    def load_data_additively(self, document: LocaleDocument) -> None:
        """
        Add a document's messages to the active variant.

        Existing keys of the document overwrite stored values;
        other keys are left untouched.

        Raises:
            RuntimeError: if no variant has been loaded yet
        """
        with self._lock:
            if self._messages is None:
                raise RuntimeError("Locale data not loaded yet")
            self._messages.update(document.messages)

    def format(self, key: str, arguments: Optional[Dict[str, Any]] = None) -> Optional[str]:
        """
        Format a message with named arguments.

        Returns:
            Formatted text, or None if the key is unknown
        """
        text = self.get_message(key)
        if text is None:
            return None

        if arguments:
            with contextlib.suppress(KeyError, ValueError, IndexError):
                text = text.format(**arguments)
        return text

    def translate(self, key: str, **kwargs) -> str:
        """
        Translate text.

        Args:
            key: Translation key (e.g., "Settings.my.plugin.Title")
            **kwargs: Replacement parameters

        Returns:
            Translated text, or the key if no translation is found
        """
        text = self.format(key, kwargs)
        return key if text is None else text


# Global instance
_locale_manager: Optional[LocaleManager] = None
_locale_manager_lock = threading.Lock()


def get_locale_manager() -> LocaleManager:
    """Get the process-wide LocaleManager, creating it on first use."""
    global _locale_manager
    with _locale_manager_lock:
        if _locale_manager is None:
            _locale_manager = LocaleManager()
        return _locale_manager


def set_locale_manager(manager: Optional[LocaleManager]) -> None:
    """Replace the process-wide LocaleManager (None resets it)."""
    global _locale_manager
    with _locale_manager_lock:
        _locale_manager = manager
