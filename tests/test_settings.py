"""
LocaleLoader Settings Tests

Beállítások és lokalizált plugin beállítások tesztjei.
"""

import json

import pytest

from localeloader.i18n.config_locale import (
    ConfigDescription,
    ConfigLocale,
    bind_localized,
    settings_locale_key,
)
from localeloader.services.settings_manager import LoaderSettings, SettingsManager


@pytest.fixture
def settings(temp_dir):
    """SettingsManager ideiglenes könyvtárral."""
    return SettingsManager(temp_dir / "config")


class TestLoaderSettings:
    """LoaderSettings tesztek."""

    def test_defaults(self):
        """Alapértékek."""
        settings = LoaderSettings()

        assert settings.fallback_language == "en"
        assert settings.locale_dir_name == "Locale"
        assert settings.dedup_window_ms == 500
        assert settings.dedup_window == 0.5
        assert settings.refresh_sentinel == "-"
        assert settings.startup_delay_ms == 5000


class TestSettingsManager:
    """SettingsManager tesztek."""

    def test_creates_config_dir(self, settings, temp_dir):
        """Konfigurációs könyvtár létrehozása."""
        assert settings.config_dir == temp_dir / "config"
        assert settings.config_dir.is_dir()

    def test_save_and_load(self, settings):
        """Mentés és visszatöltés."""
        settings.fallback_language = "de"
        settings.dedup_window_ms = 250
        settings.default_authors = "Anna"
        settings.set_plugin_setting("mod", "Audio.Volume", 80)
        settings.save_settings()

        reloaded = SettingsManager(settings.config_dir)

        assert reloaded.fallback_language == "de"
        assert reloaded.dedup_window_ms == 250
        assert reloaded.default_authors == "Anna"
        assert reloaded.get_plugin_settings("mod") == {"Audio.Volume": 80}

    def test_unknown_keys_ignored(self, temp_dir):
        """Ismeretlen kulcsok a fájlban."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        (config_dir / "settings.json").write_text(
            json.dumps({"fallback_language": "hu", "theme": "dark"}), encoding="utf-8"
        )

        settings = SettingsManager(config_dir)

        assert settings.fallback_language == "hu"
        assert settings.get("theme") is None

    def test_corrupt_file_uses_defaults(self, temp_dir):
        """Sérült beállítás fájl."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        (config_dir / "settings.json").write_text("{ nope", encoding="utf-8")

        assert SettingsManager(config_dir).fallback_language == "en"

    def test_get_set(self, settings):
        """Általános get/set."""
        settings.set("startup_delay_ms", 100)

        assert settings.get("startup_delay_ms") == 100
        assert settings.get("missing", "default") == "default"

        with pytest.raises(KeyError):
            settings.set("missing", 1)

    def test_plugin_paths(self, settings, temp_dir):
        """Plugin útvonalak Path objektumként."""
        settings.set("plugin_paths", [str(temp_dir)])

        assert settings.plugin_paths == [temp_dir]


class TestConfigLocale:
    """Lokalizált plugin beállítás tesztek."""

    def test_locale_keys(self):
        """Név és leírás kulcsok."""
        locale = ConfigLocale.for_setting("com.example.mod", "Audio", "Volume")

        assert locale.name == "Settings.com.example.mod.Audio.Volume"
        assert locale.description == "Settings.com.example.mod.Audio.Volume.Description"
        assert settings_locale_key("g", "s", "k") == "Settings.g.s.k"

    def test_bind_localized(self, settings):
        """Beállítás létrehozása ConfigLocale taggel."""
        entry = bind_localized(settings, "com.example.mod", "Audio", "Volume", 80)

        assert entry.value == 80
        assert entry.locale == ConfigLocale.for_setting("com.example.mod", "Audio", "Volume")
        assert settings.get_plugin_settings("com.example.mod") == {"Audio.Volume": 80}

    def test_value_persists(self, settings):
        """Érték mentése és visszatöltése."""
        entry = bind_localized(settings, "mod", "General", "Mode", "fast")
        entry.value = "slow"
        settings.save_settings()

        reloaded = SettingsManager(settings.config_dir)
        again = bind_localized(reloaded, "mod", "General", "Mode", "fast")

        assert again.value == "slow"

    def test_keeps_existing_tags(self, settings):
        """Meglévő leírás és tagek megmaradnak."""
        description = ConfigDescription("Plain text", ("a", "b"), tags=["advanced"])

        entry = bind_localized(settings, "mod", "General", "Choice", "a", description)

        assert entry.description.description == "Plain text"
        assert entry.description.tags[0] == "advanced"
        assert entry.locale.name == "Settings.mod.General.Choice"

    def test_acceptable_values(self, settings):
        """Elfogadható értékek ellenőrzése."""
        entry = bind_localized(
            settings, "mod", "General", "Choice", "a",
            ConfigDescription(acceptable_values=("a", "b"))
        )

        entry.value = "b"
        with pytest.raises(ValueError):
            entry.value = "c"

        assert entry.value == "b"
