"""Internet Explorer ``Favorites`` directory extractor.

Each favorite is an INI-style ``.url`` file:

    [InternetShortcut]
    URL=http://example.com
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Iterator, Optional

from ..errors import SourceUnreadableError
from .base import BookmarkRecord, Extractor, SourceKind

logger = logging.getLogger(__name__)

SHORTCUT_SECTION = "InternetShortcut"
SHORTCUT_KEY = "URL"
SHORTCUT_SUFFIX = ".url"


class ShortcutExtractor(Extractor):
    """Walks a Favorites tree and reads every shortcut file in it.

    Symlinks are not followed. Files that are not valid key-value files
    are skipped.
    """

    kind = SourceKind.SHORTCUTS

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        return path.name == "Favorites" and path.is_dir()

    def extract(self, path: Path) -> Iterator[BookmarkRecord]:
        if not path.is_dir():
            raise SourceUnreadableError("not a directory", path)

        for dirpath, dirnames, filenames in os.walk(path, onerror=_log_walk_error):
            dirnames.sort()
            for filename in sorted(filenames):
                file_path = Path(dirpath) / filename
                record = BookmarkRecord.build(
                    title=shortcut_title(filename),
                    url=self._read_url(file_path),
                )
                if record:
                    yield record

    def _read_url(self, path: Path) -> Optional[str]:
        parser = configparser.ConfigParser(interpolation=None, strict=False)
        try:
            with open(path, encoding="utf-8-sig", errors="ignore") as f:
                parser.read_file(f)
        except (OSError, configparser.Error) as e:
            logger.debug(f"[SHORTCUTS] Skipping {path}: {type(e).__name__}")
            return None
        return parser.get(SHORTCUT_SECTION, SHORTCUT_KEY, fallback=None)


def shortcut_title(filename: str) -> str:
    """Derive a bookmark title from a shortcut file name."""
    return filename.removesuffix(SHORTCUT_SUFFIX)


def _log_walk_error(error: OSError) -> None:
    logger.warning(f"[SHORTCUTS] Cannot read {error.filename}: {error.strerror}")
