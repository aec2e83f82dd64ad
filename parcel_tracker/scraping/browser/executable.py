"""
Local browser executable discovery.
"""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path

from parcel_tracker.scraping.errors import BrowserConfigurationError

_LINUX_COMMANDS = ("google-chrome", "google-chrome-stable", "chromium", "chromium-browser")
_MACOS_PATHS = (
    "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
    "/Applications/Chromium.app/Contents/MacOS/Chromium",
)


def _windows_candidates() -> list[Path]:
    roots = [
        os.getenv("PROGRAMFILES", r"C:\Program Files"),
        os.getenv("PROGRAMFILES(X86)", r"C:\Program Files (x86)"),
        os.getenv("LOCALAPPDATA"),
    ]
    return [
        Path(root) / "Google" / "Chrome" / "Application" / "chrome.exe"
        for root in roots
        if root
    ]


def resolve_browser_executable(
    override: str | None = None,
    *,
    platform: str | None = None,
) -> str | None:
    """
    Locate a Chrome/Chromium binary for a local launch.

    An explicit override must exist. Without one, well-known install
    locations for the platform are probed; None means "let Playwright use its
    bundled Chromium". The probing is best effort and not verified beyond
    file existence.
    """

    if override:
        candidate = Path(override).expanduser()
        if not candidate.is_file():
            raise BrowserConfigurationError(
                f"Browser executable not found at BROWSER_EXECUTABLE_PATH={override}"
            )
        return str(candidate)

    current = platform or sys.platform
    if current.startswith("win"):
        for path in _windows_candidates():
            if path.is_file():
                return str(path)
        return None

    if current == "darwin":
        for raw in _MACOS_PATHS:
            if Path(raw).is_file():
                return raw
        return None

    for command in _LINUX_COMMANDS:
        found = shutil.which(command)
        if found:
            return found
    return None
