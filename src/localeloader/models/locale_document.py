"""
LocaleLoader Locale Document Model

One parsed locale file: locale code, authors and message table.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from localeloader.utils.constants import UNKNOWN_LOCALE


# Accepted spellings are compared after lower-casing and dropping "_"
_LOCALE_CODE_FIELD = "localecode"
_AUTHORS_FIELD = "authors"
_MESSAGES_FIELD = "messages"


def _fold_key(name: str) -> str:
    return name.replace("_", "").lower()


@dataclass
class LocaleDocument:
    """
    Locale document data model.

    A document carries the messages of a single locale variant.
    Documents are created fresh per load and never cached.
    """

    locale_code: str = ""
    authors: List[str] = field(default_factory=list)
    messages: Dict[str, str] = field(default_factory=dict)
    source: Optional[str] = None  # File path the document was read from

    @property
    def display_code(self) -> str:
        """Locale code for logs and reports."""
        return self.locale_code or UNKNOWN_LOCALE

    @property
    def first_key(self) -> Optional[str]:
        """First message key, or None for an empty table."""
        return next(iter(self.messages), None)

    def __len__(self) -> int:
        return len(self.messages)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], source: Optional[str] = None) -> Optional["LocaleDocument"]:
        """
        Create a document from a parsed JSON object.

        Field names are matched case-insensitively. "authors" may be a
        list of strings or a single string; message values must be
        strings (null reads as an empty string).

        Returns:
            The document, or None if a field has the wrong type or
            "messages" is missing
        """
        folded = {_fold_key(str(k)): v for k, v in data.items()}

        messages = folded.get(_MESSAGES_FIELD)
        if not isinstance(messages, Mapping):
            return None
        if not all(v is None or isinstance(v, str) for v in messages.values()):
            return None

        locale_code = folded.get(_LOCALE_CODE_FIELD)
        if locale_code is not None and not isinstance(locale_code, str):
            return None

        authors = folded.get(_AUTHORS_FIELD)
        if authors is None:
            authors = []
        elif isinstance(authors, str):
            authors = [authors]
        elif not isinstance(authors, list) or not all(isinstance(a, str) for a in authors):
            return None

        return cls(
            locale_code=locale_code or "",
            authors=list(authors),
            messages={str(k): v or "" for k, v in messages.items()},
            source=source,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation of the document."""
        return {
            "localeCode": self.locale_code,
            "authors": list(self.authors),
            "messages": dict(self.messages),
        }

    def __str__(self) -> str:
        return f"{self.display_code} ({len(self.messages)} messages)"
