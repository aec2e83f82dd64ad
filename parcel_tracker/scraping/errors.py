"""
Exceptions raised by the tracking pipeline.
"""

from __future__ import annotations


class TrackingError(Exception):
    """Base exception for tracking lookups."""


class InvalidIdentifierError(TrackingError, ValueError):
    """Raised when an identifier is missing or not exactly 11 digits."""


class BrowserConfigurationError(TrackingError):
    """Raised when a browser session cannot be configured (missing token or executable)."""


class BrowserTimeoutError(TrackingError):
    """Raised by a browser session when a bounded wait expires."""
