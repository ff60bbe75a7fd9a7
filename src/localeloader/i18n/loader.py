"""
LocaleLoader Candidate Loader

Turns locale file paths into LocaleDocuments.

Files are JSON objects; comments and trailing commas are tolerated
and field names are case-insensitive. Unreadable or invalid files
are skipped and recorded, they never abort a batch.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union, TYPE_CHECKING

import json5

from localeloader.models.locale_document import LocaleDocument
from localeloader.utils.constants import (
    LOCALE_DIR_NAME,
    LOCALE_FILE_ENCODING,
    LOCALE_FILE_PATTERN,
)
from localeloader.services.logger import get_logger, log_locale_file

if TYPE_CHECKING:
    from localeloader.plugins.base import PluginInterface

logger = get_logger(__name__)

PathLike = Union[str, Path]


class LocaleFileError(Exception):
    """Base class for locale file failures."""

    def __init__(self, path: PathLike, message: str):
        super().__init__(f"{message}: {path}")
        self.path = Path(path)
        self.reason = message


class LocaleReadError(LocaleFileError):
    """The file could not be read."""


class LocaleParseError(LocaleFileError):
    """The file content is not a JSON object."""


class InvalidLocaleDocument(LocaleFileError):
    """The file parsed but is not a locale document."""


@dataclass
class LoadReport:
    """Failures collected during a batch load."""
    failures: List[Tuple[Path, str]] = field(default_factory=list)

    def record(self, error: LocaleFileError) -> None:
        self.failures.append((error.path, error.reason))

    @property
    def failed_count(self) -> int:
        return len(self.failures)

    def __bool__(self) -> bool:
        return bool(self.failures)


def read_locale_document(path: PathLike) -> LocaleDocument:
    """
    Read and parse a single locale file.

    Args:
        path: Locale JSON file

    Returns:
        Parsed document

    Raises:
        LocaleReadError: the file could not be read
        LocaleParseError: the content is not a JSON object
        InvalidLocaleDocument: "messages" is missing or a field has the wrong type
    """
    path = Path(path)

    try:
        content = path.read_text(encoding=LOCALE_FILE_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise LocaleReadError(path, f"Error reading locale file ({e})") from e

    try:
        data = json5.loads(content)
    except ValueError as e:
        raise LocaleParseError(path, f"Error parsing locale file ({e})") from e

    if not isinstance(data, dict):
        raise LocaleParseError(path, "Locale file is not a JSON object")

    document = LocaleDocument.from_dict(data, source=str(path))
    if document is None:
        raise InvalidLocaleDocument(path, "Invalid locale file (missing messages or wrong field type)")

    return document


def load_document(path: PathLike, report: Optional[LoadReport] = None) -> Optional[LocaleDocument]:
    """
    Load a single locale file, returning None on failure.

    Args:
        path: Locale JSON file
        report: Collects the failure, if any

    Returns:
        Parsed document or None
    """
    try:
        document = read_locale_document(path)
    except LocaleFileError as e:
        log_locale_file(str(e.path), error=e.reason)
        if report is not None:
            report.record(e)
        return None

    log_locale_file(str(path))
    return document


def load_all(paths: Iterable[PathLike], report: Optional[LoadReport] = None) -> List[LocaleDocument]:
    """
    Load every readable, valid locale file.

    Order of the input is kept; failed paths produce no entry.

    Args:
        paths: Locale JSON files
        report: Collects failures

    Returns:
        Parsed documents
    """
    documents = []
    for path in paths:
        document = load_document(path, report)
        if document is not None:
            documents.append(document)
    return documents


def get_locale_files(directory: Optional[PathLike]) -> List[Path]:
    """
    All locale files below a directory, recursively, in a stable order.

    Returns:
        List of paths (empty when the directory does not exist)
    """
    if not directory:
        return []

    directory = Path(directory)
    if not directory.is_dir():
        return []

    return sorted(p for p in directory.rglob(LOCALE_FILE_PATTERN) if p.is_file())


def get_plugin_locale_files(
    plugin: "PluginInterface",
    locale_dir_name: str = LOCALE_DIR_NAME
) -> List[Path]:
    """
    Locale files from a plugin's Locale/ folder.

    Args:
        plugin: Plugin handle
        locale_dir_name: Name of the locale folder inside the plugin directory

    Returns:
        List of paths
    """
    plugin_dir = plugin.plugin_dir
    if plugin_dir is None:
        return []

    return get_locale_files(Path(plugin_dir) / locale_dir_name)
