"""
LocaleLoader - Runtime locale merger for plugin-hosted applications

Discovers the Locale/ folders of loaded plugins and merges their
messages into the host's live locale store after every locale switch.

Main features:
- Locale matching with primary-language fallback
- Default-language fallback when a plugin lacks the requested locale
- Additive merging without losing existing messages
- Duplicate switch suppression
- Runtime API for plugin code
"""

__version__ = "1.0.0"
__author__ = "Levente Kulacsy"
__license__ = "MIT"

from localeloader.app import LocaleLoaderApp

__all__ = ["LocaleLoaderApp", "__version__"]
