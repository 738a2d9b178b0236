"""Safari property-list extractor.

Works on the flattened text rendering of a plist (``plutil -p``) rather than
on the binary file itself. The scan is deliberately lossy: each ``N => {``
opens a new chunk, chunks without a ``URLString`` are folders, and values
are read with a greedy per-line pattern, so a value containing a literal
double quote cannot be separated from what follows it on the same line.
"""

import logging
import re
import subprocess
from pathlib import Path
from typing import Callable, Iterator, Optional, Sequence

from ..errors import SourceUnreadableError
from .base import BookmarkRecord, Extractor, SourceKind

logger = logging.getLogger(__name__)

DEFAULT_DUMP_COMMAND = ("plutil", "-p")

CHUNK_SEPARATOR = re.compile(r"\d+ => \{")

Dumper = Callable[[Path], str]


def _key_pattern(key: str) -> re.Pattern:
    return re.compile(rf'"{key}" => "(.+)"', re.IGNORECASE)


TITLE_PATTERN = _key_pattern("title")
URL_PATTERN = _key_pattern("URLString")
PREVIEW_PATTERN = _key_pattern("PreviewText")


def command_dumper(command: Sequence[str] = DEFAULT_DUMP_COMMAND) -> Dumper:
    """Build a dumper that renders a plist as text with an external command."""

    def dump(path: Path) -> str:
        try:
            result = subprocess.run(
                [*command, str(path)],
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise SourceUnreadableError(f"cannot run {command[0]}: {e}", path) from e

        if result.returncode != 0 or not result.stdout:
            stderr = result.stderr.strip() or f"exit status {result.returncode}"
            raise SourceUnreadableError(f"{command[0]} failed: {stderr}", path)
        return result.stdout

    return dump


class PlistExtractor(Extractor):
    """Extracts bookmarks and reading list entries from Safari plists."""

    kind = SourceKind.PLIST

    def __init__(self, dumper: Optional[Dumper] = None):
        self.dumper = dumper or command_dumper()

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        return path.name.endswith(".plist") and not path.is_dir()

    def extract(self, path: Path) -> Iterator[BookmarkRecord]:
        text = self.dumper(path)
        logger.debug(f"[PLIST] Dumped {path.name} ({len(text)} chars)")
        yield from self.extract_text(text)

    def extract_text(self, text: str) -> Iterator[BookmarkRecord]:
        """Yield records from an already dumped plist."""
        for chunk in CHUNK_SEPARATOR.split(text):
            if "URLString" not in chunk:
                continue

            record = BookmarkRecord.build(
                title=_first(TITLE_PATTERN, chunk),
                url=_first(URL_PATTERN, chunk),
                description=_first(PREVIEW_PATTERN, chunk),
            )
            if record:
                yield record


def _first(pattern: re.Pattern, chunk: str) -> Optional[str]:
    match = pattern.search(chunk)
    return match.group(1) if match else None
