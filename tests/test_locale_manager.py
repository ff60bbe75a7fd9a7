"""
LocaleLoader Locale Manager Tests

Host locale store tesztjei.
"""

import threading

import pytest

from localeloader.i18n.manager import (
    LocaleManager,
    LocaleVariantDescriptor,
    get_locale_manager,
    set_locale_manager,
)
from localeloader.models.locale_document import LocaleDocument


@pytest.fixture
def host_locales(temp_dir, write_locale):
    """Host locale fájlok."""
    locales = temp_dir / "host"
    write_locale(locales / "en.json", {"localeCode": "en", "messages": {"app.title": "Title", "app.ok": "OK"}})
    write_locale(locales / "fr.json", {"localeCode": "fr", "messages": {"app.title": "Titre"}})
    write_locale(locales / "fr-CA.json", {"localeCode": "fr-CA", "messages": {"app.ok": "Correct"}})
    return locales


@pytest.fixture
def manager(host_locales):
    manager = LocaleManager(host_locales)
    yield manager
    manager.shutdown()


class TestVariantLoading:
    """Variáns betöltés tesztek."""

    def test_not_loaded_initially(self, manager):
        """Kezdetben nincs betöltött adat."""
        assert manager.is_loaded is False
        assert manager.get_message("app.title") is None
        assert manager.messages == {}

    def test_default_variant(self, manager):
        """Variáns nélkül az alapértelmezett nyelv."""
        assert manager.load_target_variant().result(timeout=5) == "en"

        assert manager.is_loaded is True
        assert manager.current_language == "en"
        assert manager.get_message("app.title") == "Title"

    def test_variant_without_code(self, manager):
        """Kód nélküli variáns az alapértelmezett nyelvet tölti."""
        assert manager.load_target_variant(LocaleVariantDescriptor(None)).result(timeout=5) == "en"
        assert manager.current_language == "en"

    def test_host_files_layered(self, manager):
        """Fallback, elsődleges nyelv, pontos kód sorrendben."""
        manager.load_target_variant(LocaleVariantDescriptor("fr-CA")).result(timeout=5)

        assert manager.messages == {"app.title": "Titre", "app.ok": "Correct"}

    def test_refresh_reloads_current(self, manager):
        """A "-" variáns az aktuális nyelvet tölti újra."""
        manager.load_target_variant(LocaleVariantDescriptor("fr")).result(timeout=5)

        code = manager.load_target_variant(LocaleVariantDescriptor("-")).result(timeout=5)

        assert code == "fr"
        assert manager.get_message("app.title") == "Titre"

    def test_reload_discards_added_messages(self, manager):
        """Újratöltés után a hozzáadott üzenetek eltűnnek."""
        manager.load_target_variant().result(timeout=5)
        manager.load_data_additively(LocaleDocument("en", messages={"plugin.key": "x"}))

        manager.load_target_variant(LocaleVariantDescriptor("-")).result(timeout=5)

        assert manager.has_message("plugin.key") is False

    def test_without_host_directory(self):
        """Host könyvtár nélkül üres, de betöltött."""
        manager = LocaleManager()
        try:
            manager.load_target_variant(LocaleVariantDescriptor("de")).result(timeout=5)

            assert manager.is_loaded is True
            assert manager.messages == {}
        finally:
            manager.shutdown()


class TestVariantListeners:
    """Variáns listener tesztek."""

    def test_listener_receives_future_and_variant(self, manager):
        """A listener megkapja a Future-t és a variánst."""
        calls = []
        manager.add_variant_listener(lambda future, variant: calls.append((future, variant)))
        variant = LocaleVariantDescriptor("fr")

        future = manager.load_target_variant(variant)
        future.result(timeout=5)

        assert calls == [(future, variant)]

    def test_listener_callback_after_load(self, manager):
        """Done-callback a betöltés után fut."""
        seen = []
        done = threading.Event()

        def listener(future, variant):
            def on_done(f):
                seen.append(manager.get_message("app.title"))
                done.set()
            future.add_done_callback(on_done)

        manager.add_variant_listener(listener)
        manager.load_target_variant(LocaleVariantDescriptor("fr"))

        assert done.wait(timeout=5)
        assert seen == ["Titre"]

    def test_listener_registered_once(self, manager):
        """Listener csak egyszer regisztrálható."""
        calls = []

        def listener(future, variant):
            calls.append(variant)

        manager.add_variant_listener(listener)
        manager.add_variant_listener(listener)
        manager.load_target_variant().result(timeout=5)

        manager.remove_variant_listener(listener)
        manager.remove_variant_listener(listener)
        manager.load_target_variant().result(timeout=5)

        assert calls == [None]


class TestStoreAccess:
    """Üzenet elérés tesztek."""

    def test_load_data_additively_requires_load(self, manager):
        """Betöltés előtt RuntimeError."""
        with pytest.raises(RuntimeError):
            manager.load_data_additively(LocaleDocument("en", messages={"a": "b"}))

    def test_load_data_additively(self, manager):
        """Additív betöltés felülír, de nem töröl."""
        manager.load_target_variant().result(timeout=5)

        manager.load_data_additively(LocaleDocument("en", messages={"app.ok": "Okay", "new": "N"}))

        assert manager.messages == {"app.title": "Title", "app.ok": "Okay", "new": "N"}

    def test_format_and_translate(self, manager):
        """Formázás és fordítás."""
        manager.load_target_variant().result(timeout=5)
        manager.load_data_additively(LocaleDocument("en", messages={"greet": "Hello {name}!"}))

        assert manager.format("greet", {"name": "Anna"}) == "Hello Anna!"
        assert manager.format("greet", {"other": 1}) == "Hello {name}!"
        assert manager.format("missing") is None
        assert manager.translate("greet", name="Peter") == "Hello Peter!"
        assert manager.translate("missing.key") == "missing.key"


class TestGlobalManager:
    """Globális példány tesztek."""

    def test_get_and_set(self):
        """get_locale_manager / set_locale_manager."""
        custom = LocaleManager()
        try:
            set_locale_manager(custom)
            assert get_locale_manager() is custom

            set_locale_manager(None)
            assert get_locale_manager() is not custom
        finally:
            custom.shutdown()
