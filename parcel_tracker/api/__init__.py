"""
parcel_tracker/api package marker.
"""
