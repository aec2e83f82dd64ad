"""
Tracking page scraper.

One lookup walks a fixed sequence of states, each bounded by its own timeout:

    init -> navigate -> await_form -> fill_submit -> await_result -> extract -> close

Every exit path, including failures, passes through close exactly once.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from parcel_tracker.config import TrackingSettings
from parcel_tracker.domain.tracking import (
    ScrapingOutcome,
    TrackingNotFound,
    TrackingSuccess,
    TrackingTimeout,
    TrackingTransientError,
    mask_identifier,
)
from parcel_tracker.scraping.browser.base import BrowserSession, BrowserSessionFactory
from parcel_tracker.scraping.errors import BrowserTimeoutError
from parcel_tracker.scraping.logging_utils import log_event
from parcel_tracker.scraping.parsing import TrackingTableParser

logger = logging.getLogger(__name__)


class TrackingScraper:
    """
    Runs the browser state machine for one identifier per call.

    Sessions are never shared between calls and no retries happen here; a
    failed attempt is returned as a typed outcome.
    """

    def __init__(
        self,
        *,
        settings: TrackingSettings,
        session_factory: BrowserSessionFactory,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._settings = settings
        self._session_factory = session_factory
        self._sleep = sleep

    def scrape(self, identifier: str) -> ScrapingOutcome:
        masked = mask_identifier(identifier)
        started = time.monotonic()

        self._enter_state("init", masked)
        try:
            session = self._session_factory.create()
        except Exception as exc:
            log_event(
                logger,
                logging.ERROR,
                "tracking_session_unavailable",
                identifier=masked,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return TrackingTransientError(
                message="Unable to acquire a browser session.",
                details=self._describe(exc),
            )

        try:
            outcome = self._run(session=session, identifier=identifier, masked=masked)
        except Exception as exc:
            log_event(
                logger,
                logging.ERROR,
                "tracking_scrape_failed",
                identifier=masked,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            outcome = TrackingTransientError(
                message="Scraping failed. Try again later.",
                details=self._describe(exc),
            )
        finally:
            self._close(session=session, masked=masked)

        log_event(
            logger,
            logging.INFO,
            "tracking_scrape_completed",
            identifier=masked,
            outcome=outcome.kind,
            records=len(outcome.records) if isinstance(outcome, TrackingSuccess) else 0,
            elapsed_ms=int((time.monotonic() - started) * 1000),
        )
        return outcome

    def _run(self, *, session: BrowserSession, identifier: str, masked: str) -> ScrapingOutcome:
        settings = self._settings

        self._enter_state("navigate", masked)
        try:
            session.goto(
                settings.tracking_url,
                wait_until=settings.navigation_wait_until,
                timeout_ms=settings.navigation_timeout_seconds * 1000,
            )
        except BrowserTimeoutError as exc:
            return TrackingTimeout(stage="navigate", message=str(exc))

        self._enter_state("await_form", masked)
        try:
            session.wait_for_selector(
                settings.identifier_selector,
                timeout_ms=settings.form_timeout_seconds * 1000,
            )
        except BrowserTimeoutError as exc:
            return TrackingTimeout(stage="await_form", message=str(exc))

        self._enter_state("fill_submit", masked)
        self._fill_and_submit(session=session, identifier=identifier, masked=masked)

        self._enter_state("await_result", masked)
        try:
            signal = session.wait_for_result(
                row_selector=settings.result_row_selector,
                not_found_phrases=settings.not_found_phrases,
                timeout_ms=settings.result_timeout_seconds * 1000,
            )
        except BrowserTimeoutError as exc:
            if self._page_reports_not_found(session=session, masked=masked):
                return TrackingNotFound()
            return TrackingTimeout(stage="await_result", message=str(exc))

        if signal == "not_found":
            return TrackingNotFound()

        self._enter_state("extract", masked)
        records = TrackingTableParser.parse(
            html=session.content(),
            row_selector=settings.result_row_selector,
        )
        return TrackingSuccess(records=tuple(records))

    def _fill_and_submit(self, *, session: BrowserSession, identifier: str, masked: str) -> None:
        # Input handlers on the target page attach late.
        if self._settings.settle_delay_seconds > 0:
            self._sleep(self._settings.settle_delay_seconds)

        try:
            session.dismiss_dialogs()
        except Exception as exc:
            log_event(
                logger,
                logging.WARNING,
                "tracking_dialog_handler_failed",
                identifier=masked,
                error=str(exc),
            )

        session.type_text(self._settings.identifier_selector, identifier)

        try:
            session.click_via_script(self._settings.submit_selector)
        except Exception as exc:
            log_event(
                logger,
                logging.WARNING,
                "tracking_submit_click_failed",
                identifier=masked,
                error=str(exc),
            )

    def _page_reports_not_found(self, *, session: BrowserSession, masked: str) -> bool:
        try:
            text = session.body_text().lower()
        except Exception as exc:
            log_event(
                logger,
                logging.WARNING,
                "tracking_body_text_unavailable",
                identifier=masked,
                error=str(exc),
            )
            return False
        return any(phrase.lower() in text for phrase in self._settings.not_found_phrases)

    @staticmethod
    def _close(*, session: BrowserSession, masked: str) -> None:
        try:
            session.close()
        except Exception as exc:
            log_event(
                logger,
                logging.WARNING,
                "tracking_session_close_failed",
                identifier=masked,
                error=str(exc),
            )

    @staticmethod
    def _enter_state(state: str, masked: str) -> None:
        log_event(logger, logging.DEBUG, "tracking_state_entered", identifier=masked, state=state)

    @staticmethod
    def _describe(exc: Exception) -> str:
        return str(exc) or type(exc).__name__
