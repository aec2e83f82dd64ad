"""
parcel_tracker/schemas/tracking.py

Response schemas for tracking lookups.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Literal

from pydantic import BaseModel, Field

from parcel_tracker.domain.tracking import (
    ScrapingOutcome,
    ShipmentRecord,
    TrackingNotFound,
    TrackingSuccess,
    TrackingTimeout,
)

SUCCESS_MESSAGE = "Shipments extracted successfully."
NOT_FOUND_MESSAGE = "no results for this identifier"
TIMEOUT_MESSAGE = "Tracking lookup timed out. Try again later."


class ShipmentRecordResponse(BaseModel):
    """
    API response model for one shipment row.
    """

    number: str
    date_and_location: str
    status: str
    comments: str | None = None

    @classmethod
    def from_record(cls, record: ShipmentRecord) -> "ShipmentRecordResponse":
        return cls(**record.to_dict())


class TrackingSuccessResponse(BaseModel):
    status: Literal["success"] = "success"
    data: list[ShipmentRecordResponse] = Field(default_factory=list)
    message: str


class TrackingErrorResponse(BaseModel):
    error: str
    details: str | None = None


def render_outcome(outcome: ScrapingOutcome) -> tuple[int, BaseModel]:
    """
    Map a scraping outcome to an HTTP status code and response body.

    Shared by the API router, the Streamlit UI and the CLI so all three
    report the same payloads.
    """

    if isinstance(outcome, TrackingSuccess):
        return HTTPStatus.OK, TrackingSuccessResponse(
            data=[ShipmentRecordResponse.from_record(record) for record in outcome.records],
            message=SUCCESS_MESSAGE,
        )
    if isinstance(outcome, TrackingNotFound):
        return HTTPStatus.NOT_FOUND, TrackingErrorResponse(error=NOT_FOUND_MESSAGE)
    if isinstance(outcome, TrackingTimeout):
        return HTTPStatus.GATEWAY_TIMEOUT, TrackingErrorResponse(
            error=TIMEOUT_MESSAGE,
            details=f"{outcome.stage}: {outcome.message}",
        )
    return HTTPStatus.INTERNAL_SERVER_ERROR, TrackingErrorResponse(
        error=outcome.message,
        details=outcome.details,
    )
