"""
LocaleLoader Injection Hook

Runs plugin locale injection after the host finished loading a
locale variant.

The host's variant load is a Future nobody waits on for us, so the
completion callback is fire-and-forget: every failure is caught at
its boundary by report_failures() and only reported.
"""

from concurrent.futures import Future
from functools import wraps
from typing import Any, Callable, Optional, TypeVar, TYPE_CHECKING

from localeloader.i18n.injection import InjectionCoordinator, InjectionResult
from localeloader.i18n.ui_support import LocaleSignals, get_locale_signals
from localeloader.services.crash_handler import ErrorCode, log_activity, report_exception
from localeloader.services.logger import get_logger
from localeloader.utils.constants import InjectionStatus

if TYPE_CHECKING:
    from localeloader.i18n.manager import LocaleManager, LocaleVariantDescriptor

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def report_failures(
    func: Optional[F] = None,
    *,
    error_code: ErrorCode = ErrorCode.LOCALE_INJECTION_ERROR,
    on_error: Optional[Callable[[Exception], None]] = None
):
    """
    Catch, log and report every exception escaping a callback.

    The wrapped function returns None when it failed.

    Usage:
        @report_failures
        def on_done(future): ...

        future.add_done_callback(report_failures(on_done, on_error=notify))
    """
    def decorator(fn: F) -> F:
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except Exception as e:
                logger.error(f"Failed to inject plugin locales: {e}", exc_info=True)
                report_exception(e, error_code)
                if on_error is not None:
                    try:
                        on_error(e)
                    except Exception:
                        logger.exception("Error in failure callback")
                return None
        return wrapper  # type: ignore[return-value]

    if func is not None:
        return decorator(func)
    return decorator


class LocaleInjectionHook:
    """
    Connects the host's variant loading to the injection coordinator.

    Example:
        hook = LocaleInjectionHook(coordinator, manager)
        hook.install()
        manager.load_target_variant(LocaleVariantDescriptor("de-DE"))
    """

    def __init__(
        self,
        coordinator: InjectionCoordinator,
        manager: "LocaleManager",
        signals: Optional[LocaleSignals] = None
    ):
        self._coordinator = coordinator
        self._manager = manager
        self._signals = signals if signals is not None else get_locale_signals()
        self.last_result: Optional[InjectionResult] = None

    def install(self) -> None:
        """Inject after every variant load of the manager."""
        self._manager.add_variant_listener(self.attach)

    def uninstall(self) -> None:
        """Stop injecting after variant loads."""
        self._manager.remove_variant_listener(self.attach)

    def attach(self, future: Future, variant: Optional["LocaleVariantDescriptor"]) -> None:
        """
        Inject once the given variant load completes.

        Args:
            future: The host's variant load task
            variant: Requested variant (None means the fallback language)
        """
        target = (variant.locale_code if variant else None) or self._coordinator.fallback_language

        def notify_failure(error: Exception) -> None:
            self._signals.injection_failed.emit(target, str(error))

        callback = report_failures(
            lambda done: self.on_variant_loaded(done, target),
            on_error=notify_failure
        )
        future.add_done_callback(callback)

    def on_variant_loaded(self, future: Future, target: str) -> InjectionResult:
        """
        Completion callback of a variant load.

        Raises:
            Exception: whatever the host's load raised; callers
                wrap this method with report_failures()
        """
        if future.cancelled():
            logger.debug(f"Locale variant load cancelled (target: {target})")
            return self._finish(InjectionResult(target, InjectionStatus.IGNORED))

        # Surfaces a failed host load at the boundary
        future.result()

        if not self._manager.is_loaded:
            logger.warning("Locale variant load completed but data is missing - skipping locale injection")
            return self._finish(InjectionResult(target, InjectionStatus.STORE_UNAVAILABLE))

        if self._coordinator.is_refresh(target):
            logger.debug(f"Skipping locale injection for refresh trigger (target: {target})")
            return self._finish(InjectionResult(target, InjectionStatus.IGNORED))

        logger.debug(f"Injecting plugin locales after variant load (target: {target})")
        result = self._coordinator.inject(target)
        log_activity("Locale injection", str(result))

        if result.injected:
            self._signals.locales_injected.emit(
                result.target, result.plugin_count, result.message_count
            )
        return self._finish(result)

    def _finish(self, result: InjectionResult) -> InjectionResult:
        self.last_result = result
        self._signals.injection_finished.emit(result.target, result.status.value)
        return result
