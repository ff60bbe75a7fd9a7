"""
LocaleLoader i18n UI Support

Qt notifications for components that must refresh their texts
after plugin locales were merged.
"""


from typing import Optional

from PySide6.QtCore import QObject, Signal


class LocaleSignals(QObject):
    """
    Qt signals of the locale loader.

    The hook emits them from the variant loader's worker thread; use a
    queued connection for slots that touch the UI.

    Usage:
        signals = get_locale_signals()
        signals.locales_injected.connect(widget.retranslate_ui, Qt.ConnectionType.QueuedConnection)
    """

    # target locale, plugin count, message count
    locales_injected = Signal(str, int, int)

    # target locale, InjectionStatus value; emitted after every attempt
    injection_finished = Signal(str, str)

    # target locale, error message
    injection_failed = Signal(str, str)


_locale_signals: Optional[LocaleSignals] = None


def get_locale_signals() -> LocaleSignals:
    """Get the LocaleSignals singleton."""
    global _locale_signals
    if _locale_signals is None:
        _locale_signals = LocaleSignals()
    return _locale_signals
