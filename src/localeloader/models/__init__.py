"""
LocaleLoader Models

Adatmodellek.
"""

from localeloader.models.locale_document import LocaleDocument

__all__ = [
    "LocaleDocument",
]
