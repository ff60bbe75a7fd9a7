"""
LocaleLoader Selection Engine Tests

Locale kiválasztás és fallback tesztjei.
"""

from localeloader.i18n.selection import SelectionResult, select
from localeloader.models.locale_document import LocaleDocument


def _doc(locale_code: str, **messages) -> LocaleDocument:
    return LocaleDocument(locale_code=locale_code, messages=messages or {"k": locale_code})


class TestSelect:
    """select tesztek."""

    def test_fallback_to_default(self):
        """Nincs egyezés, az alapértelmezett nyelv kerül kiválasztásra."""
        en = _doc("en")

        selected, used_fallback = select([en], "fr", "en")

        assert selected == [en]
        assert used_fallback is True

    def test_match_without_fallback(self):
        """Egyezés esetén nincs fallback."""
        fr = _doc("fr-FR")
        en = _doc("en")

        selected, used_fallback = select([fr, en], "fr")

        assert selected == [fr]
        assert used_fallback is False

    def test_no_match_when_target_is_default(self):
        """A cél már az alapértelmezett nyelv, nincs második kör."""
        de = _doc("de")

        result = select([de], "fr", "fr")

        assert result == SelectionResult([], False)

    def test_no_match_when_target_is_default_region(self):
        """A cél régiós változata az alapértelmezettnek."""
        de = _doc("de")

        result = select([de], "en-US", "en")

        assert result.selected == []
        assert result.used_fallback is False

    def test_fallback_without_default_candidates(self):
        """Fallback, de nincs alapértelmezett nyelvű fájl."""
        de = _doc("de")

        selected, used_fallback = select([de], "fr", "en")

        assert selected == []
        assert used_fallback is True

    def test_all_matching_candidates_kept_in_order(self):
        """Több azonos nyelvű fájl mind kiválasztásra kerül."""
        first = _doc("en", a="1")
        second = _doc("en-US", b="2")
        third = _doc("EN", c="3")

        selected, _ = select([first, _doc("de"), second, third], "en")

        assert selected == [first, second, third]

    def test_unknown_locale_never_selected(self):
        """Locale kód nélküli dokumentum."""
        unknown = _doc("")

        selected, used_fallback = select([unknown], "fr", "en")

        assert selected == []
        assert used_fallback is True

    def test_empty_candidates(self):
        """Üres jelöltlista."""
        assert select([], "en") == SelectionResult([], False)
