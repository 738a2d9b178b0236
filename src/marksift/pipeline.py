"""Run extraction over a sequence of bookmark sources."""

import logging
from pathlib import Path
from typing import Iterable, Iterator

from .classifier import Classifier
from .errors import BookmarkError
from .extractors import BookmarkRecord

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates classify -> extract for each input, in input order.

    A failing input is logged and recorded in ``failures``; the remaining
    inputs still run unless ``strict`` is set, in which case the error is
    re-raised.
    """

    def __init__(self, classifier: Classifier | None = None, strict: bool = False):
        self.classifier = classifier or Classifier()
        self.strict = strict
        self.failures: list[BookmarkError] = []

    def run(self, paths: Iterable[Path]) -> Iterator[BookmarkRecord]:
        for path in paths:
            yield from self.extract_one(Path(path))

    def extract_one(self, path: Path) -> Iterator[BookmarkRecord]:
        logger.info(f"[PIPELINE] Reading: {path}")
        count = 0
        try:
            extractor = self.classifier.classify(path)
            for record in extractor.extract(path):
                count += 1
                yield record
        except BookmarkError as e:
            logger.error(f"[PIPELINE] {type(e).__name__}: {e}")
            self.failures.append(e)
            if self.strict:
                raise
            return

        logger.info(f"[PIPELINE] Completed: {path.name} ({count} bookmarks)")


def extract_all(
    paths: Iterable[Path],
    schemeless: bool = False,
    strict: bool = False,
) -> Iterator[BookmarkRecord]:
    """Yield records from every path, skipping inputs that fail."""
    pipeline = Pipeline(Classifier(schemeless=schemeless), strict=strict)
    yield from pipeline.run(paths)
