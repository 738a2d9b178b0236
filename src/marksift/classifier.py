"""Pick the extractor for a bookmark source path."""

import logging
from pathlib import Path
from typing import Optional

from .errors import ClassificationError
from .extractors import (
    ChromiumExtractor,
    Extractor,
    GeminiExtractor,
    MarkdownExtractor,
    PlacesExtractor,
    PlainTextExtractor,
    PlistExtractor,
    ShortcutExtractor,
)
from .extractors.plist import Dumper

logger = logging.getLogger(__name__)


class Classifier:
    """Matches paths against extractors by name, suffix, and file type.

    Extractors are tried in order and the first match wins; plain text is
    the fallback for any other regular file.
    """

    def __init__(self, schemeless: bool = False, plist_dumper: Optional[Dumper] = None):
        self.extractors: list[Extractor] = [
            PlistExtractor(plist_dumper),
            PlacesExtractor(),
            ChromiumExtractor(),
            ShortcutExtractor(),
            MarkdownExtractor(),
            GeminiExtractor(),
            PlainTextExtractor(schemeless),
        ]

    def classify(self, path: Path) -> Extractor:
        """Return the extractor for ``path``.

        Raises:
            ClassificationError: If no extractor handles the path.
        """
        for extractor in self.extractors:
            if extractor.can_handle(path):
                logger.debug(f"[CLASSIFIER] {path} -> {extractor.kind.value}")
                return extractor
        raise ClassificationError("unknown bookmark format", path)


def classify(path: Path, schemeless: bool = False) -> Extractor:
    """Classify a single path with default options."""
    return Classifier(schemeless=schemeless).classify(path)
