"""
LocaleLoader Merge Engine

Additive merge of a LocaleDocument into a destination message store.

The destination is any object implementing the LocaleStore protocol.
Merging never removes keys; existing values are overwritten only
with force=True.
"""

from typing import Callable, MutableMapping, Optional, Protocol, runtime_checkable, TYPE_CHECKING

from localeloader.models.locale_document import LocaleDocument
from localeloader.services.logger import get_logger

if TYPE_CHECKING:
    from localeloader.i18n.manager import LocaleManager

logger = get_logger(__name__)


@runtime_checkable
class LocaleStore(Protocol):
    """Destination of additive merges."""

    def has_key(self, key: str) -> bool:
        ...

    def additive_load(self, document: LocaleDocument) -> None:
        ...


class DictLocaleStore:
    """LocaleStore over a plain mutable mapping."""

    def __init__(self, messages: Optional[MutableMapping[str, str]] = None):
        self.messages: MutableMapping[str, str] = {} if messages is None else messages

    def has_key(self, key: str) -> bool:
        return key in self.messages

    def additive_load(self, document: LocaleDocument) -> None:
        self.messages.update(document.messages)

    def __len__(self) -> int:
        return len(self.messages)


class LocaleManagerStore:
    """LocaleStore over the host LocaleManager's active messages."""

    def __init__(self, manager: "LocaleManager"):
        self._manager = manager

    def has_key(self, key: str) -> bool:
        return self._manager.has_message(key)

    def additive_load(self, document: LocaleDocument) -> None:
        self._manager.load_data_additively(document)


def manager_store_provider(manager: "LocaleManager") -> Callable[[], Optional[LocaleStore]]:
    """Store provider returning None until the manager has loaded a variant."""
    def provide() -> Optional[LocaleStore]:
        return LocaleManagerStore(manager) if manager.is_loaded else None
    return provide


def merge_into(store: Optional[LocaleStore], document: LocaleDocument, force: bool) -> int:
    """
    Merge a document's messages into a store.

    With force=False only the first key of the document is probed: if
    it already exists, the whole document is treated as merged before
    and skipped. Callers needing per-key suppression must filter first.

    Args:
        store: Destination store; None means not initialized yet
        document: Source document
        force: Overwrite existing values

    Returns:
        Number of keys processed (0 when skipped)
    """
    if store is None:
        logger.warning(
            f"Cannot merge {document.display_code} locale - store not available yet"
        )
        return 0

    first_key = document.first_key
    if first_key is None:
        return 0

    if not force and store.has_key(first_key):
        logger.debug(
            f"Skipping {document.display_code} locale - '{first_key}' already present"
        )
        return 0

    store.additive_load(document)
    return len(document.messages)
