"""
Shared fixtures for scraper and service tests.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from fakes import FakeSessionFactory, ManualClock

from parcel_tracker.config import TrackingSettings
from parcel_tracker.scraping.cache import ResultCache
from parcel_tracker.scraping.scraper import TrackingScraper
from parcel_tracker.services.tracking_service import TrackingService


@pytest.fixture()
def tracking_settings() -> TrackingSettings:
    return TrackingSettings()


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture()
def sleeps() -> list[float]:
    return []


@pytest.fixture()
def make_scraper(
    tracking_settings: TrackingSettings,
    sleeps: list[float],
) -> Callable[[FakeSessionFactory], TrackingScraper]:
    def _make(factory: FakeSessionFactory) -> TrackingScraper:
        return TrackingScraper(
            settings=tracking_settings,
            session_factory=factory,
            sleep=sleeps.append,
        )

    return _make


@pytest.fixture()
def make_service(
    make_scraper: Callable[[FakeSessionFactory], TrackingScraper],
    clock: ManualClock,
) -> Callable[[FakeSessionFactory], TrackingService]:
    def _make(factory: FakeSessionFactory) -> TrackingService:
        cache = ResultCache(ttl_seconds=300.0, clock=clock)
        return TrackingService(cache=cache, scraper=make_scraper(factory))

    return _make
