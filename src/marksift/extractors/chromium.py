"""Chrome and Edge ``Bookmarks`` JSON extractor."""

import json
import logging
from pathlib import Path
from typing import Iterator

from ..errors import SourceUnreadableError, StructuralParseError
from .base import BookmarkRecord, Extractor, SourceKind

logger = logging.getLogger(__name__)

ROOT_FOLDERS = ("bookmark_bar", "other")


class ChromiumExtractor(Extractor):
    """Extracts the top-level bookmarks of Chromium-family browsers.

    Only the direct children of the bookmark bar and "other bookmarks"
    roots are read; nested folders are not descended into.
    """

    kind = SourceKind.CHROMIUM

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        return path.name == "Bookmarks" and not path.is_dir()

    def extract(self, path: Path) -> Iterator[BookmarkRecord]:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnreadableError(str(e), path) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StructuralParseError(f"invalid JSON: {e}", path) from e

        roots = data.get("roots") if isinstance(data, dict) else None
        if not isinstance(roots, dict):
            raise StructuralParseError("no 'roots' object", path)

        for name in ROOT_FOLDERS:
            for child in _children(roots, name, path):
                url = child.get("url") if isinstance(child, dict) else None
                if not isinstance(url, str):
                    continue
                title = child.get("name")
                record = BookmarkRecord.build(title if isinstance(title, str) else None, url)
                if record:
                    yield record


def _children(roots: dict, name: str, path: Path) -> list:
    """Direct children of a root folder; a missing root has none."""
    root = roots.get(name)
    if root is None:
        return []
    if not isinstance(root, dict):
        raise StructuralParseError(f"root '{name}' is not an object", path)

    children = root.get("children", [])
    if not isinstance(children, list):
        raise StructuralParseError(f"root '{name}' children is not a list", path)
    logger.debug(f"[CHROMIUM] {name}: {len(children)} entries")
    return children
