"""
parcel_tracker/services package marker.
"""

from parcel_tracker.services.tracking_service import (
    TrackingService,
    build_tracking_service,
    get_tracking_service,
)

__all__ = [
    "TrackingService",
    "build_tracking_service",
    "get_tracking_service",
]
