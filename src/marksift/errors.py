"""Exceptions raised while classifying and extracting bookmark sources."""

from pathlib import Path


class BookmarkError(Exception):
    """Base class for failures scoped to a single bookmark source."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is None:
            return message
        return f"{self.path}: {message}"


class ClassificationError(BookmarkError):
    """Raised when a path matches no known bookmark format."""


class SourceUnreadableError(BookmarkError):
    """Raised when a source cannot be read, copied, or dumped."""


class StructuralParseError(BookmarkError):
    """Raised when a source is readable but structurally malformed."""
