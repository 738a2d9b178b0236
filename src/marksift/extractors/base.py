"""Base extractor interface and the normalized bookmark record."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional


class SourceKind(str, Enum):
    """Bookmark source formats understood by the extractors."""

    PLIST = "plist"
    PLACES = "places"
    CHROMIUM = "chromium"
    SHORTCUTS = "shortcuts"
    MARKDOWN = "markdown"
    GEMINI = "gemini"
    PLAIN = "plain"


@dataclass(frozen=True)
class BookmarkRecord:
    """A single bookmark: title and description are optional, url is not."""

    url: str
    title: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def build(
        cls,
        title: Optional[str],
        url: Optional[str],
        description: Optional[str] = None,
    ) -> Optional["BookmarkRecord"]:
        """Normalize raw captured fields into a record.

        Whitespace is stripped and empty fields become None. Returns None
        when no url is left, so callers can drop the capture.
        """
        url = _clean(url)
        if not url:
            return None
        return cls(url=url, title=_clean(title), description=_clean(description))


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class Extractor(ABC):
    """Base class for bookmark extractors."""

    kind: SourceKind

    @classmethod
    @abstractmethod
    def can_handle(cls, path: Path) -> bool:
        """Check if this extractor can handle the given path."""
        pass

    @abstractmethod
    def extract(self, path: Path) -> Iterator[BookmarkRecord]:
        """Yield bookmark records from the source, in source order."""
        pass
