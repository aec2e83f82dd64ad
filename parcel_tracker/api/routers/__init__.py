"""
parcel_tracker/api/routers package marker.
"""

from parcel_tracker.api.routers.tracking import router as tracking_router

__all__ = ["tracking_router"]
