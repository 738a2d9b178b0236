"""Tests for marksift.locations module."""

from pathlib import Path

from marksift.locations import default_locations, existing_locations


class TestDefaultLocations:
    """Tests for default_locations function."""

    def test_macos(self):
        """Test the macOS table starts with Safari."""
        locations = default_locations("darwin", home=Path("/Users/me"), env={})

        assert locations[0] == "/Users/me/Library/Safari/Bookmarks.plist"
        assert "/Users/me/Library/Application Support/Firefox/Profiles/*/places.sqlite" in locations

    def test_linux(self):
        """Test the Linux table covers Chromium browsers and Firefox."""
        locations = default_locations("linux", home=Path("/home/me"), env={})

        assert "/home/me/.config/google-chrome/Default/Bookmarks" in locations
        assert "/home/me/.mozilla/firefox/*/places.sqlite" in locations

    def test_windows_expands_environment(self):
        """Test that %VAR% references are expanded on Windows."""
        env = {"LOCALAPPDATA": "C:/Users/me/AppData/Local", "USERPROFILE": "C:/Users/me"}

        locations = default_locations("win32", home=Path("C:/Users/me"), env=env)

        assert "C:/Users/me/AppData/Local/Google/Chrome/User Data/Default/Bookmarks" in locations
        assert "C:/Users/me/Favorites" in locations


class TestExistingLocations:
    """Tests for existing_locations function."""

    def test_expands_globs_and_filters(self, tmp_path):
        """Test that only existing paths are returned, in table order."""
        for profile in ("b.default", "a.default"):
            (tmp_path / profile).mkdir()
            (tmp_path / profile / "places.sqlite").write_text("")
        bookmarks = tmp_path / "Bookmarks"
        bookmarks.write_text("{}")

        found = existing_locations([
            str(tmp_path / "missing.plist"),
            str(bookmarks),
            str(tmp_path / "*" / "places.sqlite"),
        ])

        assert found == [
            bookmarks,
            tmp_path / "a.default" / "places.sqlite",
            tmp_path / "b.default" / "places.sqlite",
        ]
