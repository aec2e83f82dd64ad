"""
parcel_tracker/domain package marker.
"""

from parcel_tracker.domain.tracking import (
    ScrapingOutcome,
    ShipmentRecord,
    TrackingNotFound,
    TrackingSuccess,
    TrackingTimeout,
    TrackingTransientError,
    mask_identifier,
    validate_identifier,
)

__all__ = [
    "ScrapingOutcome",
    "ShipmentRecord",
    "TrackingNotFound",
    "TrackingSuccess",
    "TrackingTimeout",
    "TrackingTransientError",
    "mask_identifier",
    "validate_identifier",
]
