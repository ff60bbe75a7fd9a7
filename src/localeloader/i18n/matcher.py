"""
LocaleLoader Locale Matcher

Decides whether a document's locale code satisfies a requested target.
"""

from typing import Optional

from localeloader.utils.constants import LOCALE_SEPARATORS


def normalize_locale(code: Optional[str]) -> str:
    """Lower-cased, stripped locale code ("" for None)."""
    return (code or "").strip().lower()


def primary_language(code: Optional[str]) -> str:
    """
    Primary language subtag of a locale code.

    Example:
        primary_language("en-US") -> "en"
        primary_language("zh_Hant_TW") -> "zh"
        primary_language("fr") -> "fr"
    """
    normalized = normalize_locale(code)
    for separator in LOCALE_SEPARATORS:
        normalized = normalized.split(separator, 1)[0]
    return normalized


def matches(candidate_code: Optional[str], target_code: Optional[str]) -> bool:
    """
    Check if a candidate locale satisfies the target locale.

    Exact matches are case-insensitive; otherwise both codes are
    reduced to their primary language ("en-US" matches "en" and "en-GB").

    Args:
        candidate_code: Locale code of the document
        target_code: Requested locale code

    Returns:
        True if the candidate applies to the target
    """
    candidate = normalize_locale(candidate_code)
    target = normalize_locale(target_code)

    if not candidate or not target:
        return False

    if candidate == target:
        return True

    candidate_base = primary_language(candidate)
    return bool(candidate_base) and candidate_base == primary_language(target)
