"""Line-oriented text extractors: markdown, gemini, and plain text.

Each line of the file yields at most one bookmark. Lines that do not match
the dialect are skipped.
"""

import logging
import re
from abc import abstractmethod
from pathlib import Path
from typing import Iterator, Optional

from ..errors import SourceUnreadableError
from .base import BookmarkRecord, Extractor, SourceKind

logger = logging.getLogger(__name__)

_URI_TAIL = r"[^\s<>\"]*[^\s<>\".,;:!?'()\[\]]"

SCHEME_URI = rf"[A-Za-z][A-Za-z0-9+.\-]*://{_URI_TAIL}"

# Bare host names such as www.example.com/path, with an alphabetic
# top-level label and no scheme in front.
SCHEMELESS_URI = (
    r"(?<![\w@./:\-])"
    r"(?:[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?\.)+[A-Za-z]{2,}"
    r"(?::\d+)?"
    rf"(?:/{_URI_TAIL}|/)?"
    r"(?![\w@\-])"
)

URI_PATTERN = re.compile(SCHEME_URI)
URI_OR_SCHEMELESS_PATTERN = re.compile(f"{SCHEME_URI}|{SCHEMELESS_URI}")

MARKDOWN_TARGET = re.compile(r'\(\s*(?P<url>[^\s()]+)(?:\s+"(?P<description>[^"]*)")?\s*\)')

GEMINI_LINK = re.compile(r"^=>\s+(?P<url>\S+)(?:\s+(?P<title>.*))?$")


def find_uri(line: str, schemeless: bool = False) -> Optional[re.Match]:
    """Find the first address in a line.

    Only ``scheme://`` addresses are recognized unless ``schemeless`` is set.
    """
    pattern = URI_OR_SCHEMELESS_PATTERN if schemeless else URI_PATTERN
    return pattern.search(line)


class LineExtractor(Extractor):
    """Reads a text file line by line, delegating each line to a dialect."""

    suffix: str = ""

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        return path.name.endswith(cls.suffix) and not path.is_dir()

    def extract(self, path: Path) -> Iterator[BookmarkRecord]:
        try:
            f = open(path, encoding="utf-8", errors="ignore")
        except OSError as e:
            raise SourceUnreadableError(str(e), path) from e

        with f:
            for number, line in enumerate(f, start=1):
                record = self.parse_line(line.rstrip("\r\n"))
                if record:
                    yield record
                else:
                    logger.debug(f"[LINES] {path.name}:{number}: no {self.kind.value} link")

    @abstractmethod
    def parse_line(self, line: str) -> Optional[BookmarkRecord]:
        """Return the bookmark found on a line, or None."""
        pass


class MarkdownExtractor(LineExtractor):
    """Extracts ``[title](url "description")`` links."""

    kind = SourceKind.MARKDOWN
    suffix = ".md"

    def parse_line(self, line: str) -> Optional[BookmarkRecord]:
        start = line.find("[")
        while start != -1:
            end = _closing_bracket(line, start)
            target = MARKDOWN_TARGET.match(line, end + 1) if end is not None else None
            if target:
                return BookmarkRecord.build(
                    title=line[start + 1:end],
                    url=target["url"],
                    description=target["description"],
                )
            start = line.find("[", start + 1)
        return None


def _closing_bracket(line: str, start: int) -> Optional[int]:
    """Index of the bracket closing the one at ``start``, nesting included."""
    depth = 0
    for index in range(start, len(line)):
        char = line[index]
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return index
    return None


class GeminiExtractor(LineExtractor):
    """Extracts ``=> url title`` link lines from gemtext."""

    kind = SourceKind.GEMINI
    suffix = ".gmi"

    def parse_line(self, line: str) -> Optional[BookmarkRecord]:
        match = GEMINI_LINK.match(line)
        if not match:
            return None
        return BookmarkRecord.build(title=match["title"], url=match["url"])


class PlainTextExtractor(LineExtractor):
    """Splits a line around its first address: title before, description after."""

    kind = SourceKind.PLAIN

    def __init__(self, schemeless: bool = False):
        self.schemeless = schemeless

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        return path.is_file()

    def parse_line(self, line: str) -> Optional[BookmarkRecord]:
        match = find_uri(line, self.schemeless)
        if not match:
            return None
        return BookmarkRecord.build(
            title=line[:match.start()],
            url=match.group(),
            description=line[match.end():],
        )
