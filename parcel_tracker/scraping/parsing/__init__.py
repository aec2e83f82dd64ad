"""
Parsing helpers for tracking pages.
"""

from parcel_tracker.scraping.parsing.table_parser import TrackingTableParser

__all__ = ["TrackingTableParser"]
