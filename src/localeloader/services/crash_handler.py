"""
LocaleLoader Crash Handler

Error reporting for failures that cannot propagate to a caller.
Locale injection runs as a fire-and-forget callback, so every
unexpected exception ends up here instead of in the host.
"""


import sys
import os
import platform
import traceback
import datetime
import json
import threading
from pathlib import Path
from typing import Optional, List, Dict, Any
from dataclasses import dataclass, field, asdict
from collections import deque
from enum import Enum

from localeloader.services.logger import get_logger

logger = get_logger(__name__)


class ErrorCode(Enum):
    """
    Error codes for crash reports.
    """
    # General errors (1xxx)
    UNKNOWN_ERROR = 1000
    UNHANDLED_EXCEPTION = 1001
    ASSERTION_ERROR = 1002

    # File errors (2xxx)
    FILE_NOT_FOUND = 2001
    FILE_READ_ERROR = 2002
    FILE_PERMISSION_ERROR = 2004

    # Plugin errors (5xxx)
    PLUGIN_LOAD_ERROR = 5001
    PLUGIN_EXECUTION_ERROR = 5002

    # Memory errors (8xxx)
    OUT_OF_MEMORY = 8001

    # Locale errors (10xxx)
    LOCALE_PARSE_ERROR = 10001
    LOCALE_INVALID_DOCUMENT = 10002
    LOCALE_STORE_UNAVAILABLE = 10003
    LOCALE_INJECTION_ERROR = 10004
    LOCALE_VARIANT_LOAD_ERROR = 10005


@dataclass
class ActivityLogEntry:
    """Single activity log entry."""
    timestamp: str
    action: str
    details: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "action": self.action,
            "details": self.details
        }


@dataclass
class SystemInfo:
    """System information for crash reports."""
    os_name: str
    os_version: str
    os_architecture: str
    python_version: str
    app_version: str
    qt_version: str
    cpu_count: Optional[int] = None

    @classmethod
    def collect(cls, app_version: str = "unknown") -> "SystemInfo":
        """Collect current system information."""
        from PySide6.QtCore import qVersion

        return cls(
            os_name=platform.system(),
            os_version=platform.version(),
            os_architecture=platform.machine(),
            python_version=platform.python_version(),
            app_version=app_version,
            qt_version=qVersion(),
            cpu_count=os.cpu_count()
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CrashReport:
    """Complete crash report."""
    error_code: int
    error_name: str
    error_message: str
    traceback_text: str
    timestamp: str
    system_info: Dict[str, Any]
    activity_log: List[Dict[str, Any]]
    additional_info: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "crash_report": {
                "error_code": self.error_code,
                "error_name": self.error_name,
                "error_message": self.error_message,
                "timestamp": self.timestamp,
            },
            "traceback": self.traceback_text,
            "system_info": self.system_info,
            "activity_log": self.activity_log,
            "additional_info": self.additional_info
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


class CrashHandler:
    """
    Global crash handler singleton.

    Handles:
    - Activity logging in background
    - Crash report generation
    - Crash report file saving
    """

    _instance: Optional["CrashHandler"] = None

    # Maximum activity log entries to keep
    MAX_ACTIVITY_LOG = 500

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self._activity_log: deque = deque(maxlen=self.MAX_ACTIVITY_LOG)
        self._lock = threading.Lock()
        self._app_version = "unknown"
        self._crash_reports_dir: Optional[Path] = None
        self._original_excepthook = sys.excepthook
        self._reports: deque = deque(maxlen=self.MAX_ACTIVITY_LOG)

    def initialize(
        self,
        app_version: str,
        crash_reports_dir: Optional[Path] = None
    ) -> None:
        """
        Initialize the crash handler.

        Args:
            app_version: Application version string
            crash_reports_dir: Directory for crash reports
        """
        self._app_version = app_version

        if crash_reports_dir:
            self._crash_reports_dir = crash_reports_dir
        else:
            self._crash_reports_dir = Path(__file__).parent.parent.parent.parent / "crash_reports"

        self._crash_reports_dir.mkdir(parents=True, exist_ok=True)

        sys.excepthook = self._exception_hook

        self.log_activity("CrashHandler initialized")

    def shutdown(self) -> None:
        """Restore original exception hook."""
        sys.excepthook = self._original_excepthook

    def log_activity(
        self,
        action: str,
        details: Optional[str] = None
    ) -> None:
        """
        Log an activity entry.

        Args:
            action: Action description (e.g., "Locale injection")
            details: Optional additional details
        """
        entry = ActivityLogEntry(
            timestamp=datetime.datetime.now().isoformat(),
            action=action,
            details=details
        )

        with self._lock:
            self._activity_log.append(entry)

    def get_activity_log(self) -> List[Dict[str, Any]]:
        """Get activity log as list of dicts."""
        with self._lock:
            return [entry.to_dict() for entry in self._activity_log]

    def get_reports(self) -> List[CrashReport]:
        """Reports created since startup, oldest first."""
        with self._lock:
            return list(self._reports)

    def clear(self) -> None:
        """Forget activity and reports (used between test runs)."""
        with self._lock:
            self._activity_log.clear()
            self._reports.clear()

    def _classify_exception(
        self,
        exc_type: type,
        exc_value: BaseException
    ) -> ErrorCode:
        """Classify exception into error code."""
        from localeloader.i18n.loader import (
            LocaleParseError, InvalidLocaleDocument, LocaleReadError
        )

        exc_msg = str(exc_value).lower()

        if issubclass(exc_type, LocaleParseError):
            return ErrorCode.LOCALE_PARSE_ERROR
        if issubclass(exc_type, InvalidLocaleDocument):
            return ErrorCode.LOCALE_INVALID_DOCUMENT
        if issubclass(exc_type, LocaleReadError):
            return ErrorCode.FILE_READ_ERROR

        if issubclass(exc_type, FileNotFoundError):
            return ErrorCode.FILE_NOT_FOUND
        if issubclass(exc_type, PermissionError):
            return ErrorCode.FILE_PERMISSION_ERROR
        if issubclass(exc_type, OSError):
            return ErrorCode.FILE_READ_ERROR

        if issubclass(exc_type, MemoryError):
            return ErrorCode.OUT_OF_MEMORY

        if issubclass(exc_type, AssertionError):
            return ErrorCode.ASSERTION_ERROR

        if "plugin" in exc_msg:
            if "load" in exc_msg:
                return ErrorCode.PLUGIN_LOAD_ERROR
            return ErrorCode.PLUGIN_EXECUTION_ERROR

        if "locale" in exc_msg:
            return ErrorCode.LOCALE_INJECTION_ERROR

        return ErrorCode.UNHANDLED_EXCEPTION

    def _create_crash_report(
        self,
        exc_type: type,
        exc_value: BaseException,
        exc_tb,
        error_code: Optional[ErrorCode] = None
    ) -> CrashReport:
        """Create a crash report from exception info."""
        if error_code is None:
            error_code = self._classify_exception(exc_type, exc_value)

        tb_text = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))

        return CrashReport(
            error_code=error_code.value,
            error_name=error_code.name,
            error_message=str(exc_value),
            traceback_text=tb_text,
            timestamp=datetime.datetime.now().isoformat(),
            system_info=SystemInfo.collect(self._app_version).to_dict(),
            activity_log=self.get_activity_log()
        )

    def _save_crash_report(self, report: CrashReport) -> Optional[Path]:
        """Save crash report to file, if a reports directory is set."""
        if self._crash_reports_dir is None:
            return None

        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        filepath = self._crash_reports_dir / f"crash_{timestamp}_{report.error_code}.json"

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(report.to_json())

        return filepath

    def _exception_hook(
        self,
        exc_type: type,
        exc_value: BaseException,
        exc_tb
    ) -> None:
        """Global exception hook."""
        if issubclass(exc_type, KeyboardInterrupt):
            self._original_excepthook(exc_type, exc_value, exc_tb)
            return

        self.handle_exception(exc_type, exc_value, exc_tb)
        self._original_excepthook(exc_type, exc_value, exc_tb)

    def handle_exception(
        self,
        exc_type: type,
        exc_value: BaseException,
        exc_tb,
        error_code: Optional[ErrorCode] = None
    ) -> Optional[CrashReport]:
        """
        Handle a caught exception without terminating the application.

        Args:
            exc_type: Exception type
            exc_value: Exception value
            exc_tb: Exception traceback
            error_code: Optional specific error code

        Returns:
            The created report, or None if reporting itself failed
        """
        try:
            self.log_activity(
                "Exception handled",
                f"{exc_type.__name__}: {exc_value}"
            )

            report = self._create_crash_report(
                exc_type, exc_value, exc_tb, error_code
            )
            with self._lock:
                self._reports.append(report)

            if report_path := self._save_crash_report(report):
                logger.info(f"Crash report saved: {report_path}")

            return report

        except Exception as e:
            logger.error(f"Error handling exception: {e}")
            return None


# Convenience functions

def get_crash_handler() -> CrashHandler:
    """Get the CrashHandler singleton."""
    return CrashHandler()


def log_activity(action: str, details: Optional[str] = None) -> None:
    """Log an activity entry."""
    get_crash_handler().log_activity(action, details)


def report_exception(
    exc: BaseException,
    error_code: Optional[ErrorCode] = None
) -> Optional[CrashReport]:
    """Report a caught exception object."""
    return get_crash_handler().handle_exception(
        type(exc), exc, exc.__traceback__, error_code
    )


def initialize_crash_handler(
    app_version: str,
    crash_reports_dir: Optional[Path] = None
) -> None:
    """Initialize the crash handler."""
    get_crash_handler().initialize(app_version, crash_reports_dir)
