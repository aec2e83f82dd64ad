"""
parcel_tracker/api/routers/tracking.py

Shipment tracking lookup endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from parcel_tracker.api.dependencies import get_tracking_identifier
from parcel_tracker.schemas.tracking import (
    TrackingErrorResponse,
    TrackingSuccessResponse,
    render_outcome,
)
from parcel_tracker.services.tracking_service import TrackingService, get_tracking_service

router = APIRouter(tags=["tracking"])


@router.get(
    "/tracking",
    response_model=TrackingSuccessResponse,
    responses={
        400: {"model": TrackingErrorResponse},
        404: {"model": TrackingErrorResponse},
        500: {"model": TrackingErrorResponse},
        504: {"model": TrackingErrorResponse},
    },
)
def track_shipments(
    identifier: str | None = Depends(get_tracking_identifier),
    tracking_service: TrackingService = Depends(get_tracking_service),
) -> JSONResponse:
    """
    Return the shipments in transit for one taxpayer identifier.
    """

    try:
        outcome = tracking_service.track(identifier)
    except ValueError as exc:
        return _json_response(status.HTTP_400_BAD_REQUEST, TrackingErrorResponse(error=str(exc)))

    status_code, body = render_outcome(outcome)
    return _json_response(status_code, body)


def _json_response(status_code: int, body: BaseModel) -> JSONResponse:
    # Error bodies omit an absent "details"; record "comments" stays explicit.
    exclude_none = isinstance(body, TrackingErrorResponse)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=exclude_none))
