"""
Browser automation capability used by the tracking scraper.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Literal

ResultSignal = Literal["rows", "not_found"]


class BrowserSession(ABC):
    """
    One browser page owned by exactly one tracking lookup.

    Every wait is bounded by an explicit timeout in milliseconds and raises
    BrowserTimeoutError when it expires.
    """

    @abstractmethod
    def goto(self, url: str, *, wait_until: str, timeout_ms: float) -> None:
        """
        Load the page and wait for the requested load state.
        """

    @abstractmethod
    def wait_for_selector(self, selector: str, *, timeout_ms: float) -> None:
        """
        Wait until an element matching the selector is attached and visible.
        """

    @abstractmethod
    def type_text(self, selector: str, text: str) -> None:
        """
        Type text into the element key by key.
        """

    @abstractmethod
    def click_via_script(self, selector: str) -> None:
        """
        Invoke the element's click handler from page script, not a pointer event.
        """

    @abstractmethod
    def dismiss_dialogs(self) -> None:
        """
        Dismiss any native dialog (alert, confirm) opened from now on.
        """

    @abstractmethod
    def wait_for_result(
        self,
        *,
        row_selector: str,
        not_found_phrases: Sequence[str],
        timeout_ms: float,
    ) -> ResultSignal:
        """
        Resolve on whichever comes first: a matching row, or a not-found phrase in the body.
        """

    @abstractmethod
    def body_text(self) -> str:
        """
        Return the visible text of the page body.
        """

    @abstractmethod
    def content(self) -> str:
        """
        Return the current page HTML.
        """

    @abstractmethod
    def close(self) -> None:
        """
        Release the page, browser and driver.
        """


class BrowserSessionFactory(ABC):
    """
    Acquires a fresh BrowserSession per lookup.
    """

    @abstractmethod
    def create(self) -> BrowserSession:
        """
        Return a ready session or raise BrowserConfigurationError.
        """
