"""
Playwright-backed browser sessions and their local/remote factories.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from urllib.parse import urlencode

from playwright.sync_api import Browser, Page, Playwright, sync_playwright
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from parcel_tracker.config import BrowserSettings
from parcel_tracker.scraping.browser.base import BrowserSession, BrowserSessionFactory, ResultSignal
from parcel_tracker.scraping.browser.executable import resolve_browser_executable
from parcel_tracker.scraping.errors import BrowserConfigurationError, BrowserTimeoutError
from parcel_tracker.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)

REMOTE_CONNECT_TIMEOUT_MS = 30_000

_RESULT_PROBE = """
({ rowSelector, phrases }) => {
  if (document.querySelector(rowSelector) !== null) {
    return "rows";
  }
  const text = ((document.body && document.body.innerText) || "").toLowerCase();
  return phrases.some((phrase) => text.includes(phrase)) ? "not_found" : false;
}
"""


class PlaywrightBrowserSession(BrowserSession):
    """
    Drives one Playwright page; owns the browser and driver it was created with.
    """

    def __init__(self, *, playwright: Playwright, browser: Browser, page: Page) -> None:
        self._playwright = playwright
        self._browser = browser
        self._page = page
        self._closed = False

    def goto(self, url: str, *, wait_until: str, timeout_ms: float) -> None:
        try:
            self._page.goto(url, wait_until=wait_until, timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise BrowserTimeoutError(f"Navigation to {url} timed out after {timeout_ms:.0f}ms") from exc

    def wait_for_selector(self, selector: str, *, timeout_ms: float) -> None:
        try:
            self._page.wait_for_selector(selector, state="visible", timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise BrowserTimeoutError(
                f"Selector {selector} did not appear within {timeout_ms:.0f}ms"
            ) from exc

    def type_text(self, selector: str, text: str) -> None:
        self._page.locator(selector).press_sequentially(text)

    def click_via_script(self, selector: str) -> None:
        self._page.locator(selector).evaluate("element => element.click()")

    def dismiss_dialogs(self) -> None:
        self._page.on("dialog", lambda dialog: dialog.dismiss())

    def wait_for_result(
        self,
        *,
        row_selector: str,
        not_found_phrases: Sequence[str],
        timeout_ms: float,
    ) -> ResultSignal:
        try:
            handle = self._page.wait_for_function(
                _RESULT_PROBE,
                arg={
                    "rowSelector": row_selector,
                    "phrases": [phrase.lower() for phrase in not_found_phrases],
                },
                timeout=timeout_ms,
            )
        except PlaywrightTimeoutError as exc:
            raise BrowserTimeoutError(
                f"No result rows or not-found message within {timeout_ms:.0f}ms"
            ) from exc
        return "rows" if handle.json_value() == "rows" else "not_found"

    def body_text(self) -> str:
        return self._page.inner_text("body")

    def content(self) -> str:
        return self._page.content()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._browser.close()
        finally:
            self._playwright.stop()


class LocalBrowserSessionFactory(BrowserSessionFactory):
    """
    Launches a headless Chromium process on this host.
    """

    def __init__(self, *, settings: BrowserSettings) -> None:
        self._settings = settings

    def create(self) -> BrowserSession:
        executable_path = resolve_browser_executable(self._settings.executable_path)
        playwright = sync_playwright().start()
        try:
            browser = playwright.chromium.launch(
                headless=self._settings.headless,
                executable_path=executable_path,
                args=list(self._settings.launch_args),
            )
            page = browser.new_page()
        except Exception:
            playwright.stop()
            raise
        log_event(
            logger,
            logging.DEBUG,
            "browser_session_launched",
            executable_path=executable_path or "bundled",
        )
        return PlaywrightBrowserSession(playwright=playwright, browser=browser, page=page)


class RemoteBrowserSessionFactory(BrowserSessionFactory):
    """
    Connects to a hosted browser endpoint authenticated by a token.
    """

    def __init__(self, *, settings: BrowserSettings) -> None:
        self._settings = settings

    def endpoint_url(self) -> str:
        token = self._settings.remote_token
        if not token:
            raise BrowserConfigurationError(
                "BROWSERLESS_TOKEN is not configured; a remote browser session cannot be acquired."
            )
        separator = "&" if "?" in self._settings.remote_endpoint else "?"
        return f"{self._settings.remote_endpoint}{separator}{urlencode({'token': token})}"

    def create(self) -> BrowserSession:
        endpoint_url = self.endpoint_url()
        playwright = sync_playwright().start()
        try:
            browser = playwright.chromium.connect_over_cdp(
                endpoint_url,
                timeout=REMOTE_CONNECT_TIMEOUT_MS,
            )
            page = browser.new_page()
        except Exception:
            playwright.stop()
            raise
        log_event(
            logger,
            logging.DEBUG,
            "browser_session_connected",
            endpoint=self._settings.remote_endpoint,
        )
        return PlaywrightBrowserSession(playwright=playwright, browser=browser, page=page)
