"""
LocaleLoader Constants

Alkalmazás-szintű konstansok és enumerációk.
"""

from enum import Enum
from typing import Final

# Application info
APP_NAME: Final[str] = "LocaleLoader"
APP_VERSION: Final[str] = "1.0.0"
APP_DESCRIPTION: Final[str] = "Runtime locale merger for plugin-hosted applications"
APP_AUTHORS: Final[str] = "Levente Kulacsy"

# Locale files
LOCALE_DIR_NAME: Final[str] = "Locale"
LOCALE_FILE_PATTERN: Final[str] = "*.json"
LOCALE_FILE_ENCODING: Final[str] = "utf-8"
UNKNOWN_LOCALE: Final[str] = "unknown"

# Locale codes
DEFAULT_LOCALE: Final[str] = "en"
RUNTIME_LOCALE: Final[str] = "en-US"  # Locale code of runtime-added strings
LOCALE_SEPARATORS: Final[tuple] = ("-", "_")

# Injection
REFRESH_SENTINEL: Final[str] = "-"  # Host reload trigger, never a real switch
DEDUP_WINDOW_MS: Final[int] = 500
STARTUP_DELAY_MS: Final[int] = 5000
FALLBACK_AUTHOR: Final[str] = "LocaleLoader"
AUTHOR_SEPARATOR: Final[str] = ", "

# Localized config keys
SETTINGS_KEY_PREFIX: Final[str] = "Settings"
SETTINGS_DESCRIPTION_SUFFIX: Final[str] = "Description"


class InjectionStatus(str, Enum):
    """
    Egy injektálási kísérlet kimenetele.
    """
    INJECTED = "injected"                    # Merge ran
    SUPPRESSED = "suppressed"                # Duplicate trigger inside the dedup window
    IGNORED = "ignored"                      # Refresh sentinel
    STORE_UNAVAILABLE = "store_unavailable"  # Destination store not loaded yet
    NO_PLUGINS = "no_plugins"                # Nothing to inject
