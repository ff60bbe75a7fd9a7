"""
LocaleLoader Utilities

Segédfüggvények és konstansok.
"""

from localeloader.utils.constants import *

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "APP_AUTHORS",
    "DEFAULT_LOCALE",
    "REFRESH_SENTINEL",
    "InjectionStatus",
]
