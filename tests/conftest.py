"""Shared pytest fixtures for marksift tests."""

import json
import sqlite3
from pathlib import Path

import pytest


@pytest.fixture
def sample_plist_dump() -> str:
    """Sample ``plutil -p`` rendering of a Safari Bookmarks.plist."""
    return """{
  "Children" => [
    0 => {
      "Title" => "History"
      "WebBookmarkIdentifier" => "History"
      "WebBookmarkType" => "WebBookmarkTypeProxy"
    }
    1 => {
      "Children" => [
        0 => {
          "URLString" => "https://untitled.example/"
          "WebBookmarkType" => "WebBookmarkTypeLeaf"
        }
        1 => {
          "URIDictionary" => {
            "title" => "Example Domain"
          }
          "URLString" => "https://example.com/"
          "WebBookmarkType" => "WebBookmarkTypeLeaf"
        }
      ]
      "Title" => "BookmarksBar"
      "WebBookmarkType" => "WebBookmarkTypeList"
    }
    2 => {
      "Children" => [
        0 => {
          "ReadingList" => {
            "PreviewText" => "A short preview of the article."
          }
          "URIDictionary" => {
            "title" => "Reading List Article"
          }
          "URLString" => "https://news.example/article"
          "WebBookmarkType" => "WebBookmarkTypeLeaf"
        }
      ]
      "Title" => "com.apple.ReadingList"
      "WebBookmarkType" => "WebBookmarkTypeList"
    }
  ]
  "Title" => ""
  "WebBookmarkType" => "WebBookmarkTypeList"
}
"""


@pytest.fixture
def chromium_bookmarks() -> dict:
    """Chrome/Edge Bookmarks document with one nested folder."""
    return {
        "checksum": "0" * 32,
        "roots": {
            "bookmark_bar": {
                "children": [
                    {"name": "Example", "type": "url", "url": "https://example.com/"},
                    {
                        "name": "Folder",
                        "type": "folder",
                        "children": [
                            {"name": "Nested", "type": "url", "url": "https://nested.example/"},
                        ],
                    },
                    {"name": "Python", "type": "url", "url": "https://www.python.org/"},
                ],
                "name": "Bookmarks bar",
                "type": "folder",
            },
            "other": {
                "children": [
                    {"name": "Other", "type": "url", "url": "https://other.example/"},
                ],
                "name": "Other bookmarks",
                "type": "folder",
            },
            "synced": {
                "children": [
                    {"name": "Synced", "type": "url", "url": "https://synced.example/"},
                ],
                "name": "Mobile bookmarks",
                "type": "folder",
            },
        },
        "version": 1,
    }


@pytest.fixture
def chromium_file(tmp_path: Path, chromium_bookmarks: dict) -> Path:
    """Write the Chromium fixture to a file named Bookmarks."""
    path = tmp_path / "Bookmarks"
    path.write_text(json.dumps(chromium_bookmarks))
    return path


PLACES_SCHEMA = """
CREATE TABLE moz_places (
    id INTEGER PRIMARY KEY,
    url LONGVARCHAR,
    title LONGVARCHAR
);
CREATE TABLE moz_bookmarks (
    id INTEGER PRIMARY KEY,
    type INTEGER,
    fk INTEGER DEFAULT NULL,
    parent INTEGER,
    position INTEGER,
    title LONGVARCHAR,
    guid TEXT
);
"""


@pytest.fixture
def places_db(tmp_path: Path) -> Path:
    """Create a minimal Firefox places.sqlite with tags and a smart folder."""
    path = tmp_path / "places.sqlite"
    conn = sqlite3.connect(path)
    conn.executescript(PLACES_SCHEMA)
    conn.executemany(
        "INSERT INTO moz_places (id, url, title) VALUES (?, ?, ?)",
        [
            (1, "https://www.mozilla.org/", "Mozilla"),
            (2, "https://example.com/", "Example"),
            (3, "place:sort=8&maxResults=10", "Most Visited"),
            (4, "https://untitled.example/", None),
        ],
    )
    conn.executemany(
        "INSERT INTO moz_bookmarks (id, type, fk, parent, position, title, guid) "
        "VALUES (?, ?, ?, ?, ?, ?, ?)",
        [
            (1, 2, None, 0, 0, "", "root________"),
            (2, 2, None, 1, 0, "menu", "menu________"),
            (3, 2, None, 1, 1, "toolbar", "toolbar_____"),
            (4, 2, None, 1, 2, "tags", "tags________"),
            # Tag folders
            (5, 2, None, 4, 0, "browser", "tagbrowser__"),
            (6, 2, None, 4, 1, "firefox", "tagfirefox__"),
            # Bookmarks
            (10, 1, 1, 3, 0, "Mozilla", "bookmark1___"),
            (11, 1, 2, 2, 0, "Example", "bookmark2___"),
            (12, 1, 3, 3, 1, "Most Visited", "smartfolder_"),
            (13, 1, 4, 2, 1, None, "untitled____"),
            # Tag entries for Mozilla
            (20, 1, 1, 5, 0, None, "tagentry1___"),
            (21, 1, 1, 6, 0, None, "tagentry2___"),
        ],
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def favorites_dir(tmp_path: Path) -> Path:
    """Create an Internet Explorer Favorites tree."""
    favorites = tmp_path / "Favorites"
    (favorites / "Links").mkdir(parents=True)
    (favorites / "Example.url").write_text("[InternetShortcut]\nURL=http://example.com\n")
    (favorites / "Links" / "Python.url").write_text(
        "[DEFAULT]\nBASEURL=https://www.python.org/\n"
        "[InternetShortcut]\nURL=https://www.python.org/\nIconIndex=0\n"
    )
    (favorites / "desktop.ini").write_text("[.ShellClassInfo]\nLocalizedResourceName=@shell32.dll\n")
    (favorites / "notes.txt").write_text("not a shortcut file\n")
    return favorites
