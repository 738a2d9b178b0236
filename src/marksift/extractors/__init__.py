"""Bookmark extractors for different source formats."""

from .base import BookmarkRecord, Extractor, SourceKind
from .chromium import ChromiumExtractor
from .lines import GeminiExtractor, LineExtractor, MarkdownExtractor, PlainTextExtractor
from .places import PlacesExtractor
from .plist import PlistExtractor
from .shortcuts import ShortcutExtractor

__all__ = [
    "BookmarkRecord",
    "Extractor",
    "SourceKind",
    "ChromiumExtractor",
    "GeminiExtractor",
    "LineExtractor",
    "MarkdownExtractor",
    "PlainTextExtractor",
    "PlacesExtractor",
    "PlistExtractor",
    "ShortcutExtractor",
]
