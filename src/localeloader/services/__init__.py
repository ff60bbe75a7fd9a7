"""
LocaleLoader Services

Logging, error reporting and settings.
"""

from localeloader.services.logger import get_logger, initialize_logging
from localeloader.services.crash_handler import (
    CrashHandler,
    ErrorCode,
    get_crash_handler,
    report_exception,
)
from localeloader.services.settings_manager import (
    LoaderSettings,
    SettingsManager,
    get_settings_manager,
)

__all__ = [
    "get_logger",
    "initialize_logging",
    "CrashHandler",
    "ErrorCode",
    "get_crash_handler",
    "report_exception",
    "LoaderSettings",
    "SettingsManager",
    "get_settings_manager",
]
