"""marksift - extract bookmarks from browser stores and text files."""

__version__ = "0.1.0"
