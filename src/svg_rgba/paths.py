"""Locations of system fonts.

:author: Shay Hill
:created: 2026-10-19
"""

import os
import sys
from pathlib import Path


def _font_dirs() -> tuple[Path, ...]:
    """Get the directories searched for system fonts on this platform.

    :return: candidate font directories. Some of them may not exist.
    """
    home = Path.home()
    if sys.platform == "win32":
        windir = Path(os.environ.get("WINDIR", "C:\\Windows"))
        local = Path(os.environ.get("LOCALAPPDATA", home / "AppData" / "Local"))
        return (windir / "Fonts", local / "Microsoft" / "Windows" / "Fonts")
    if sys.platform == "darwin":
        return (
            Path("/System/Library/Fonts"),
            Path("/Library/Fonts"),
            home / "Library" / "Fonts",
        )
    data_home = Path(os.environ.get("XDG_DATA_HOME", home / ".local" / "share"))
    return (
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
        data_home / "fonts",
        home / ".fonts",
    )


SYSTEM_FONT_DIRS = _font_dirs()
