"""
LocaleLoader - Main Entry Point

Loads a locale variant and injects the plugin locales into it.
"""

import sys
import argparse
from pathlib import Path


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="localeloader",
        description="LocaleLoader - Runtime locale merger for plugin-hosted applications"
    )
    parser.add_argument(
        "--target",
        default=None,
        help="Locale code to switch to (default: fallback language)"
    )
    parser.add_argument(
        "--plugins",
        action="append",
        default=[],
        type=Path,
        help="Plugin directory to scan (repeatable)"
    )
    parser.add_argument(
        "--locales",
        type=Path,
        default=None,
        help="Directory of the host's own locale files"
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Settings directory (default: application data directory)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (verbose output)"
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """
    Primary application entry point.
    """
    from localeloader.utils.constants import APP_NAME, APP_VERSION

    args = parse_arguments(argv)

    if args.version:
        print(f"{APP_NAME} v{APP_VERSION}")
        sys.exit(0)

    from PySide6.QtCore import QCoreApplication, Qt

    qt_app = QCoreApplication(sys.argv[:1])
    qt_app.setApplicationName(APP_NAME)
    qt_app.setApplicationVersion(APP_VERSION)
    qt_app.setOrganizationName(APP_NAME)

    from localeloader.services.settings_manager import SettingsManager, set_settings_manager
    settings = SettingsManager(args.config_dir)
    set_settings_manager(settings)

    from localeloader.services.logger import initialize_logging, get_logger, shutdown_logging
    initialize_logging(
        log_dir=settings.config_dir / "logs",
        debug_mode=args.debug or settings.debug_logging,
        console_output=args.debug
    )
    logger = get_logger(__name__)
    logger.info(f"Starting {APP_NAME} v{APP_VERSION}")

    from localeloader.services.crash_handler import initialize_crash_handler, log_activity
    initialize_crash_handler(APP_VERSION, settings.config_dir / "crash_reports")
    log_activity("Application starting", f"Version {APP_VERSION}")

    from localeloader.app import LocaleLoaderApp
    app = LocaleLoaderApp(settings, args.locales, args.plugins)
    app.start()

    # Queued into the main thread: the hook emits from the variant worker
    app.signals.injection_finished.connect(qt_app.quit, Qt.ConnectionType.QueuedConnection)
    app.signals.injection_failed.connect(qt_app.quit, Qt.ConnectionType.QueuedConnection)

    app.switch_locale(args.target)
    exit_code = qt_app.exec()

    result = app.hook.last_result
    if result is None:
        print("Locale injection failed, see the log for details")
        exit_code = exit_code or 1
    else:
        print(result)
        for plugin_id in result.fallback_plugins:
            print(f"  fallback language used by {plugin_id}")

    app.shutdown()
    shutdown_logging()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
