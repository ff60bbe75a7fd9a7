"""
LocaleLoader Locale Matcher Tests

Locale kód illesztés tesztjei.
"""

import pytest

from localeloader.i18n.matcher import matches, normalize_locale, primary_language


class TestPrimaryLanguage:
    """primary_language tesztek."""

    @pytest.mark.parametrize("code, expected", [
        ("en-US", "en"),
        ("EN-us", "en"),
        ("zh_Hant_TW", "zh"),
        ("fr", "fr"),
        ("  de-DE ", "de"),
        ("", ""),
        (None, ""),
    ])
    def test_primary_language(self, code, expected):
        """Elsődleges nyelvi címke."""
        assert primary_language(code) == expected

    def test_normalize_locale(self):
        """Normalizálás kisbetűre."""
        assert normalize_locale(" En-US ") == "en-us"
        assert normalize_locale(None) == ""


class TestMatches:
    """matches tesztek."""

    def test_case_insensitive_exact(self):
        """Kis- és nagybetű független egyezés."""
        assert matches("EN-us", "en-US") is True
        assert matches("en-US", "EN-us") is True

    def test_primary_subtag_symmetric(self):
        """Alap nyelv egyezés mindkét irányban."""
        assert matches("fr-CA", "fr") is True
        assert matches("fr", "fr-CA") is True

    def test_sibling_regions_match(self):
        """Azonos nyelv különböző régióval."""
        assert matches("en-GB", "en-US") is True

    def test_underscore_separator(self):
        """Aláhúzás elválasztó."""
        assert matches("pt_BR", "pt") is True

    @pytest.mark.parametrize("candidate, target", [
        ("", "en"),
        ("en", ""),
        (None, "en"),
        ("en", None),
        ("", ""),
    ])
    def test_empty_never_matches(self, candidate, target):
        """Üres kód sosem illeszkedik."""
        assert matches(candidate, target) is False

    def test_different_languages(self):
        """Eltérő nyelvek."""
        assert matches("de", "fr") is False
        assert matches("de-AT", "fr-FR") is False

    def test_no_prefix_matching(self):
        """Nincs részleges egyezés az alap nyelven túl."""
        assert matches("e", "en") is False
        assert matches("eng", "en") is False

    def test_separator_only_codes(self):
        """Üres elsődleges címke nem illeszkedik."""
        assert matches("-x", "-y") is False
