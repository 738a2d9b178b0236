"""Default bookmark locations per operating system."""

import glob
import os
import sys
from pathlib import Path
from typing import Mapping

MACOS_LOCATIONS = [
    "~/Library/Safari/Bookmarks.plist",
    "~/Library/Application Support/Google/Chrome/Default/Bookmarks",
    "~/Library/Application Support/Microsoft Edge/Default/Bookmarks",
    "~/Library/Application Support/Firefox/Profiles/*/places.sqlite",
]

LINUX_LOCATIONS = [
    "~/.config/google-chrome/Default/Bookmarks",
    "~/.config/chromium/Default/Bookmarks",
    "~/.config/microsoft-edge/Default/Bookmarks",
    "~/.mozilla/firefox/*/places.sqlite",
]

WINDOWS_LOCATIONS = [
    "%LOCALAPPDATA%/Google/Chrome/User Data/Default/Bookmarks",
    "%LOCALAPPDATA%/Microsoft/Edge/User Data/Default/Bookmarks",
    "%APPDATA%/Mozilla/Firefox/Profiles/*/places.sqlite",
    "%USERPROFILE%/Favorites",
]


def default_locations(
    platform: str | None = None,
    home: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> list[str]:
    """Return the candidate bookmark path patterns for a platform.

    Patterns are expanded (home directory and ``%VAR%`` references) but
    globs are left in place.
    """
    platform = platform or sys.platform
    home = home or Path.home()
    env = os.environ if env is None else env

    if platform == "darwin":
        patterns = MACOS_LOCATIONS
    elif platform.startswith("win"):
        patterns = WINDOWS_LOCATIONS
    else:
        patterns = LINUX_LOCATIONS

    return [_expand(pattern, home, env) for pattern in patterns]


def existing_locations(patterns: list[str] | None = None) -> list[Path]:
    """Expand globs and keep the locations that exist, in table order."""
    found = []
    for pattern in patterns if patterns is not None else default_locations():
        found.extend(Path(match) for match in sorted(glob.glob(pattern)))
    return found


def _expand(pattern: str, home: Path, env: Mapping[str, str]) -> str:
    if pattern.startswith("~/"):
        pattern = str(home / pattern[2:])
    for name, value in env.items():
        pattern = pattern.replace(f"%{name}%", value)
    return pattern
