from __future__ import annotations

import pytest
from fakes import FakeBrowserSession, FakeSessionFactory, ManualClock, results_page

from parcel_tracker.domain.tracking import (
    ShipmentRecord,
    TrackingNotFound,
    TrackingSuccess,
    TrackingTimeout,
    TrackingTransientError,
)
from parcel_tracker.scraping.errors import BrowserTimeoutError, InvalidIdentifierError

IDENTIFIER = "12345678901"
ROWS = [("123", "01/01", "Delivered"), ("124", "02/01", "In transit")]


class TestValidation:
    @pytest.mark.parametrize(
        "identifier",
        [
            None,
            "",
            "123",
            "123456789012",
            "1234567890a",
            "123.456.789-01",
            " 12345678901",
            "12345678901\n",
            "١٢٣٤٥٦٧٨٩٠١",
        ],
    )
    def test_rejects_before_cache_or_browser(self, make_service, identifier) -> None:
        factory = FakeSessionFactory()
        service = make_service(factory)

        with pytest.raises(InvalidIdentifierError):
            service.track(identifier)

        assert factory.created == []
        assert len(service.cache) == 0

    def test_missing_identifier_message(self, make_service) -> None:
        service = make_service(FakeSessionFactory())

        with pytest.raises(InvalidIdentifierError, match="required"):
            service.track(None)


class TestCaching:
    def test_fresh_entry_skips_browser(self, make_service) -> None:
        factory = FakeSessionFactory()
        service = make_service(factory)
        cached = [ShipmentRecord(number="9", date_and_location="x", status="Delivered")]
        service.cache.put(IDENTIFIER, cached)

        outcome = service.track(IDENTIFIER)

        assert outcome == TrackingSuccess(records=tuple(cached))
        assert factory.created == []

    def test_success_is_cached_under_identifier(self, make_service) -> None:
        factory = FakeSessionFactory([FakeBrowserSession(html=results_page(ROWS))])
        service = make_service(factory)

        outcome = service.track(IDENTIFIER)

        assert isinstance(outcome, TrackingSuccess)
        assert [record.number for record in outcome.records] == ["123", "124"]
        entry = service.cache.get(IDENTIFIER)
        assert entry is not None
        assert entry.records == outcome.records

    def test_second_call_within_ttl_is_served_from_cache(self, make_service, clock: ManualClock) -> None:
        factory = FakeSessionFactory([FakeBrowserSession(html=results_page(ROWS))])
        service = make_service(factory)

        first = service.track(IDENTIFIER)
        clock.advance(299)
        second = service.track(IDENTIFIER)

        assert first == second
        assert len(factory.created) == 1

    def test_expired_entry_triggers_new_scrape(self, make_service, clock: ManualClock) -> None:
        factory = FakeSessionFactory(
            [
                FakeBrowserSession(html=results_page(ROWS)),
                FakeBrowserSession(html=results_page([("125", "03/01", "Delivered")])),
            ]
        )
        service = make_service(factory)

        service.track(IDENTIFIER)
        clock.advance(301)
        outcome = service.track(IDENTIFIER)

        assert len(factory.created) == 2
        assert [record.number for record in outcome.records] == ["125"]


class TestClassification:
    def test_zero_rows_is_not_found_and_cached(self, make_service) -> None:
        factory = FakeSessionFactory([FakeBrowserSession(html=results_page([("a", "b")]))])
        service = make_service(factory)

        assert service.track(IDENTIFIER) == TrackingNotFound()
        entry = service.cache.get(IDENTIFIER)
        assert entry is not None
        assert entry.records == ()

        assert service.track(IDENTIFIER) == TrackingNotFound()
        assert len(factory.created) == 1

    def test_timeout_is_not_cached(self, make_service) -> None:
        factory = FakeSessionFactory(
            [FakeBrowserSession(result=BrowserTimeoutError("no rows"), body="")]
        )
        service = make_service(factory)

        outcome = service.track(IDENTIFIER)

        assert isinstance(outcome, TrackingTimeout)
        assert service.cache.get(IDENTIFIER) is None

    def test_transient_error_is_not_cached(self, make_service) -> None:
        factory = FakeSessionFactory([FakeBrowserSession(goto_error=RuntimeError("boom"))])
        service = make_service(factory)

        outcome = service.track(IDENTIFIER)

        assert outcome == TrackingTransientError(
            message="Scraping failed. Try again later.",
            details="boom",
        )
        assert service.cache.get(IDENTIFIER) is None

    def test_page_not_found_message_is_not_cached(self, make_service) -> None:
        factory = FakeSessionFactory([FakeBrowserSession(result="not_found")])
        service = make_service(factory)

        assert service.track(IDENTIFIER) == TrackingNotFound()
        assert service.cache.get(IDENTIFIER) is None
