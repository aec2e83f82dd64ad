"""
parcel_tracker/domain/tracking.py

Domain models for shipment tracking lookups.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal, Union

from parcel_tracker.scraping.errors import InvalidIdentifierError

IDENTIFIER_PATTERN = re.compile(r"\d{11}", flags=re.ASCII)
UNAVAILABLE = "Unavailable"


def validate_identifier(identifier: str | None) -> str:
    """
    Return the identifier unchanged if it is exactly 11 decimal digits.

    Raises InvalidIdentifierError otherwise. No trimming or formatting is
    applied; "123.456.789-01" is rejected.
    """

    if identifier is None or identifier == "":
        raise InvalidIdentifierError("identifier is required.")
    if IDENTIFIER_PATTERN.fullmatch(identifier) is None:
        raise InvalidIdentifierError("identifier must contain exactly 11 digits.")
    return identifier


def mask_identifier(identifier: str) -> str:
    """
    Hide all but the last three characters for log output.
    """

    return f"***{identifier[-3:]}" if len(identifier) > 3 else "***"


@dataclass(frozen=True)
class ShipmentRecord:
    """
    One row of the carrier's tracking table.
    """

    number: str = UNAVAILABLE
    date_and_location: str = UNAVAILABLE
    status: str = UNAVAILABLE
    comments: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {
            "number": self.number,
            "date_and_location": self.date_and_location,
            "status": self.status,
            "comments": self.comments,
        }


@dataclass(frozen=True)
class TrackingSuccess:
    records: tuple[ShipmentRecord, ...] = field(default_factory=tuple)
    kind: Literal["success"] = "success"


@dataclass(frozen=True)
class TrackingNotFound:
    reason: str = "no results for this identifier"
    kind: Literal["not_found"] = "not_found"


@dataclass(frozen=True)
class TrackingTimeout:
    """
    A wait state expired before its condition was met.
    """

    stage: str
    message: str
    kind: Literal["timeout"] = "timeout"


@dataclass(frozen=True)
class TrackingTransientError:
    """
    Session acquisition failed or the session raised unexpectedly.
    """

    message: str
    details: str
    kind: Literal["transient_error"] = "transient_error"


ScrapingOutcome = Union[TrackingSuccess, TrackingNotFound, TrackingTimeout, TrackingTransientError]
