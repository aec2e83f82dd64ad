"""
Browser session abstractions and their Playwright implementations.
"""

from parcel_tracker.scraping.browser.base import BrowserSession, BrowserSessionFactory, ResultSignal
from parcel_tracker.scraping.browser.factory import build_session_factory

__all__ = [
    "BrowserSession",
    "BrowserSessionFactory",
    "ResultSignal",
    "build_session_factory",
]
