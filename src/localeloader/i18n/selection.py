"""
LocaleLoader Selection Engine

Picks the documents that apply to a target locale, falling back to
the default language when nothing matches.
"""

from typing import Iterator, List, NamedTuple, Sequence

from localeloader.i18n.matcher import matches
from localeloader.models.locale_document import LocaleDocument
from localeloader.utils.constants import DEFAULT_LOCALE


class SelectionResult(NamedTuple):
    """Selected documents and whether the fallback language was used."""
    selected: List[LocaleDocument]
    used_fallback: bool


def _matching(candidates: Sequence[LocaleDocument], code: str) -> Iterator[LocaleDocument]:
    return (doc for doc in candidates if matches(doc.locale_code, code))


def select(
    candidates: Sequence[LocaleDocument],
    target: str,
    default_locale: str = DEFAULT_LOCALE
) -> SelectionResult:
    """
    Select the candidates for a target locale.

    Every matching candidate is selected, in input order; several
    files for the same locale are all kept. When nothing matches the
    target, candidates of the default locale are selected instead,
    unless the target already is the default locale.

    Args:
        candidates: Documents of one plugin
        target: Requested locale code
        default_locale: Fallback locale code

    Returns:
        SelectionResult(selected, used_fallback)

    Example:
        select([en_doc], "fr") -> SelectionResult([en_doc], True)
    """
    selected = list(_matching(candidates, target))
    if selected:
        return SelectionResult(selected, False)

    if not matches(target, default_locale):
        return SelectionResult(list(_matching(candidates, default_locale)), True)

    return SelectionResult([], False)
