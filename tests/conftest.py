"""
LocaleLoader Test Fixtures

Közös teszt fixtures és segédfüggvények.
"""

import json
import pytest
from pathlib import Path
import tempfile
import shutil

from localeloader.i18n.api import set_api
from localeloader.i18n.injection import InjectionCoordinator
from localeloader.i18n.manager import set_locale_manager
from localeloader.i18n.merge import DictLocaleStore
from localeloader.plugins.base import FolderPlugin, PluginInfo, PluginManager
from localeloader.services.crash_handler import get_crash_handler


class FakeClock:
    """Kézzel léptethető óra (másodperc)."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000.0


@pytest.fixture(autouse=True)
def reset_globals():
    """
    Globális állapot visszaállítása minden teszt után.
    """
    yield
    set_api(None)
    set_locale_manager(None)
    get_crash_handler().clear()


@pytest.fixture
def temp_dir():
    """
    Ideiglenes könyvtár tesztekhez.
    """
    dir_path = Path(tempfile.mkdtemp())
    yield dir_path
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture
def write_locale():
    """
    Locale fájl írása; dict esetén JSON, string esetén nyers tartalom.
    """
    def _write(path: Path, content) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_plugin(temp_dir, write_locale):
    """
    Plugin könyvtár létrehozása Locale/ fájlokkal.

    Usage:
        make_plugin("a", {"en.json": {"localeCode": "en", "messages": {...}}})
    """
    def _make(plugin_id: str, files=None) -> FolderPlugin:
        plugin_dir = temp_dir / "plugins" / plugin_id
        plugin_dir.mkdir(parents=True, exist_ok=True)
        for name, content in (files or {}).items():
            write_locale(plugin_dir / "Locale" / name, content)
        return FolderPlugin(plugin_dir, PluginInfo(id=plugin_id, name=plugin_id))
    return _make


@pytest.fixture
def plugin_manager():
    """Üres PluginManager."""
    return PluginManager()


@pytest.fixture
def store():
    """Memória-alapú locale store."""
    return DictLocaleStore()


@pytest.fixture
def clock():
    """Léptethető óra."""
    return FakeClock()


@pytest.fixture
def coordinator(plugin_manager, store, clock):
    """Coordinator a memória store-ral és a léptethető órával."""
    return InjectionCoordinator(plugin_manager, lambda: store, clock=clock)
