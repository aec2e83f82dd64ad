"""
Session factory selection from browser settings.
"""

from __future__ import annotations

from parcel_tracker.config import BrowserSettings
from parcel_tracker.scraping.browser.base import BrowserSessionFactory
from parcel_tracker.scraping.browser.playwright_session import (
    LocalBrowserSessionFactory,
    RemoteBrowserSessionFactory,
)


def build_session_factory(settings: BrowserSettings) -> BrowserSessionFactory:
    """
    Pick the local or remote variant once, at construction time.
    """

    if settings.mode == "remote":
        return RemoteBrowserSessionFactory(settings=settings)
    if settings.mode == "local":
        return LocalBrowserSessionFactory(settings=settings)
    raise ValueError(f"Unknown browser mode='{settings.mode}'. Allowed modes: local, remote.")
