"""Firefox places.sqlite extractor."""

import logging
import shutil
import sqlite3
import tempfile
from contextlib import closing, contextmanager
from pathlib import Path
from typing import Iterator

from ..errors import SourceUnreadableError, StructuralParseError
from .base import BookmarkRecord, Extractor, SourceKind

logger = logging.getLogger(__name__)

TAGS_ROOT_GUID = "tags________"

# A tag is a folder under the tags root; tagging a place adds a titleless
# bookmark for that place inside the tag folder.
BOOKMARKS_QUERY = f"""
WITH tag_folders AS (
    SELECT id, title
      FROM moz_bookmarks
     WHERE parent = (SELECT id FROM moz_bookmarks WHERE guid = '{TAGS_ROOT_GUID}')
)
SELECT b.title,
       p.url,
       (SELECT group_concat(t.title, ' ')
          FROM moz_bookmarks AS tagged
          JOIN tag_folders AS t ON t.id = tagged.parent
         WHERE tagged.fk = b.fk) AS tags
  FROM moz_bookmarks AS b
  JOIN moz_places AS p ON p.id = b.fk
 WHERE b.title IS NOT NULL
   AND b.title != ''
   AND b.parent NOT IN (SELECT id FROM tag_folders)
   AND substr(p.url, 1, 6) != 'place:'
 ORDER BY b.id
"""


@contextmanager
def private_copy(path: Path) -> Iterator[Path]:
    """Copy a database into a temporary directory removed on exit.

    Firefox keeps places.sqlite exclusively locked while running, so the
    live file is never opened directly.
    """
    with tempfile.TemporaryDirectory(prefix="marksift-") as tmp_dir:
        copy = Path(tmp_dir) / path.name
        try:
            shutil.copyfile(path, copy)
        except OSError as e:
            raise SourceUnreadableError(f"cannot copy database: {e}", path) from e
        logger.debug(f"[PLACES] Copied {path} to {copy}")
        yield copy


class PlacesExtractor(Extractor):
    """Extracts bookmarks and their tags from a Firefox places database."""

    kind = SourceKind.PLACES

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        return path.name.endswith(".sqlite") and not path.is_dir()

    def extract(self, path: Path) -> Iterator[BookmarkRecord]:
        with private_copy(path) as copy:
            try:
                with closing(self._connect(copy)) as conn:
                    conn.execute("BEGIN")
                    for title, url, tags in conn.execute(BOOKMARKS_QUERY):
                        record = BookmarkRecord.build(title, url, tags)
                        if record:
                            yield record
                    conn.rollback()
            except sqlite3.Error as e:
                raise StructuralParseError(f"query failed: {e}", path) from e

    @staticmethod
    def _connect(path: Path) -> sqlite3.Connection:
        return sqlite3.connect(
            f"{path.resolve().as_uri()}?mode=ro",
            uri=True,
            isolation_level=None,
        )
