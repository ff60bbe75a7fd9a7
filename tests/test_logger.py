"""
LocaleLoader Logging Tests

Naplózás tesztjei.
"""

import logging

import pytest

from localeloader.services.logger import (
    LOG_FILE_NAME,
    get_logger,
    initialize_logging,
    log_injection,
    log_locale_file,
    log_plugin_registration,
    shutdown_logging,
)


@pytest.fixture
def restore_logging():
    """A localeloader logger visszaállítása."""
    root = logging.getLogger("localeloader")
    level = root.level
    yield
    shutdown_logging()
    root.setLevel(level)


class TestLogging:
    """Logger beállítás tesztek."""

    def test_namespaced_loggers(self):
        """Minden logger a localeloader névtér alatt."""
        assert get_logger("localeloader.i18n.loader").name == "localeloader.i18n.loader"
        assert get_logger("files").name == "localeloader.files"

    def test_log_file(self, temp_dir, restore_logging):
        """Rotáló log fájl a megadott könyvtárban."""
        log_file = initialize_logging(temp_dir / "logs", debug_mode=True)
        get_logger("test").debug("debug line")
        shutdown_logging()

        assert log_file == temp_dir / "logs" / LOG_FILE_NAME
        content = log_file.read_text(encoding="utf-8")
        assert "debug line" in content
        assert "MainThread" in content

    def test_without_file(self, restore_logging):
        """Könyvtár nélkül nincs log fájl."""
        assert initialize_logging(None) is None
        assert logging.getLogger("localeloader").level == logging.INFO

    def test_reinitialize_replaces_handlers(self, temp_dir, restore_logging):
        """Újrainicializálás nem halmoz handlereket."""
        root = logging.getLogger("localeloader")
        before = len(root.handlers)

        initialize_logging(temp_dir / "a", console_output=True)
        initialize_logging(temp_dir / "b", console_output=True)

        assert len(root.handlers) == before + 2


class TestBoundaryHelpers:
    """Határpont naplózás tesztek."""

    def test_locale_file(self, caplog):
        """Kihagyott fájl figyelmeztetés."""
        with caplog.at_level(logging.DEBUG, logger="localeloader"):
            log_locale_file("en.json")
            log_locale_file("bad.json", error="Error parsing locale file")

        assert [r.levelno for r in caplog.records] == [logging.DEBUG, logging.WARNING]
        assert "bad.json" in caplog.records[1].getMessage()

    def test_injection(self, caplog):
        """Injektálás összesítő."""
        with caplog.at_level(logging.INFO, logger="localeloader"):
            log_injection("en", 2, 5)

        assert caplog.records[0].getMessage() == "Injected 5 messages from 2 plugins (target: en)"

    def test_plugin_registration(self, caplog):
        """Plugin regisztráció."""
        with caplog.at_level(logging.INFO, logger="localeloader"):
            log_plugin_registration("alpha")
            log_plugin_registration("beta", error="duplicate id")

        assert caplog.records[1].levelno == logging.WARNING
