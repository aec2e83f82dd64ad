"""
parcel_tracker/schemas package marker.
"""

from parcel_tracker.schemas.tracking import (
    ShipmentRecordResponse,
    TrackingErrorResponse,
    TrackingSuccessResponse,
    render_outcome,
)

__all__ = [
    "ShipmentRecordResponse",
    "TrackingErrorResponse",
    "TrackingSuccessResponse",
    "render_outcome",
]
