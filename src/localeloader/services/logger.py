"""
LocaleLoader Logging

All loggers live under the "localeloader" namespace. Injections run on
the variant loader's worker threads, so every record carries the
thread name.

Boundary helpers log the three places where data enters the store:
locale file loads, injection batches and plugin registration.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional


ROOT_LOGGER_NAME = "localeloader"
LOG_FILE_NAME = "localeloader.log"
MAX_LOG_SIZE = 1024 * 1024  # 1 MB per file
MAX_LOG_FILES = 3

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(threadName)-18s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)
_handlers: list = []


def initialize_logging(
    log_dir: Optional[Path] = None,
    debug_mode: bool = False,
    console_output: bool = False
) -> Optional[Path]:
    """
    Configure the "localeloader" logger.

    Safe to call again; handlers of the previous call are closed.

    Args:
        log_dir: Directory of the rotating log file (no file when None)
        debug_mode: Log per-file and per-plugin details (DEBUG level)
        console_output: Also log to stderr

    Returns:
        Path of the log file, if any
    """
    shutdown_logging()

    level = logging.DEBUG if debug_mode else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)
    _root_logger.setLevel(level)

    log_file = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME
        _handlers.append(RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_SIZE,
            backupCount=MAX_LOG_FILES,
            encoding='utf-8'
        ))

    if console_output:
        _handlers.append(logging.StreamHandler(sys.stderr))

    for handler in _handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        _root_logger.addHandler(handler)

    _root_logger.info(f"Logging initialized (level: {logging.getLevelName(level)}, file: {log_file})")
    return log_file


def shutdown_logging() -> None:
    """Detach and close the handlers added by initialize_logging()."""
    while _handlers:
        handler = _handlers.pop()
        _root_logger.removeHandler(handler)
        handler.close()


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the "localeloader" namespace.

    Example:
        logger = get_logger(__name__)
        logger.debug("Loading locales from my_plugin")
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# Boundary helpers

def log_locale_file(path: str, error: Optional[str] = None) -> None:
    """Log a locale file load; failures are warnings, the batch goes on."""
    logger = get_logger("files")
    if error is None:
        logger.debug(f"Locale file loaded: {path}")
    else:
        logger.warning(f"Locale file skipped: {path} ({error})")


def log_injection(target: str, plugin_count: int, message_count: int) -> None:
    """Log the totals of an injection batch."""
    get_logger("injection").info(
        f"Injected {message_count} messages from {plugin_count} plugins (target: {target})"
    )


def log_plugin_registration(plugin: str, error: Optional[str] = None) -> None:
    """Log a plugin registration attempt."""
    logger = get_logger("plugins")
    if error is None:
        logger.info(f"Plugin registered: {plugin}")
    else:
        logger.warning(f"Plugin not registered: {plugin} ({error})")
