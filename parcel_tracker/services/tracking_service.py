"""
parcel_tracker/services/tracking_service.py

Service orchestration for shipment tracking lookups.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from parcel_tracker.config import get_browser_settings, get_tracking_settings
from parcel_tracker.domain.tracking import (
    ScrapingOutcome,
    TrackingNotFound,
    TrackingSuccess,
    mask_identifier,
    validate_identifier,
)
from parcel_tracker.scraping.browser import build_session_factory
from parcel_tracker.scraping.cache import ResultCache
from parcel_tracker.scraping.logging_utils import log_event
from parcel_tracker.scraping.scraper import TrackingScraper

logger = logging.getLogger(__name__)


class TrackingService:
    """
    Validates identifiers, serves fresh cached results and scrapes on a miss.
    """

    def __init__(self, *, cache: ResultCache, scraper: TrackingScraper) -> None:
        self._cache = cache
        self._scraper = scraper

    @property
    def cache(self) -> ResultCache:
        return self._cache

    def track(self, identifier: str | None) -> ScrapingOutcome:
        """
        Look up shipments for one identifier.

        Raises InvalidIdentifierError before any cache or browser access.
        Successful scrapes are cached even when empty; an empty result is
        reported as TrackingNotFound.
        """

        identifier = validate_identifier(identifier)
        masked = mask_identifier(identifier)

        entry = self._cache.get(identifier)
        if entry is not None:
            log_event(
                logger,
                logging.INFO,
                "tracking_cache_hit",
                identifier=masked,
                records=len(entry.records),
            )
            return self._classify(TrackingSuccess(records=entry.records))

        outcome = self._scraper.scrape(identifier)
        if isinstance(outcome, TrackingSuccess):
            self._cache.put(identifier, outcome.records)
        return self._classify(outcome)

    @staticmethod
    def _classify(outcome: ScrapingOutcome) -> ScrapingOutcome:
        if isinstance(outcome, TrackingSuccess) and not outcome.records:
            return TrackingNotFound()
        return outcome


def build_tracking_service() -> TrackingService:
    """
    Wire settings, cache, session factory and scraper into a service.
    """

    tracking_settings = get_tracking_settings()
    scraper = TrackingScraper(
        settings=tracking_settings,
        session_factory=build_session_factory(get_browser_settings()),
    )
    cache = ResultCache(ttl_seconds=tracking_settings.cache_ttl_seconds)
    return TrackingService(cache=cache, scraper=scraper)


@lru_cache(maxsize=1)
def get_tracking_service() -> TrackingService:
    """
    Build and cache the process-wide tracking service.
    """

    return build_tracking_service()
