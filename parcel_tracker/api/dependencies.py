"""
parcel_tracker/api/dependencies.py

Shared FastAPI dependencies for request parameters.
"""

from __future__ import annotations

from fastapi import Query


def get_tracking_identifier(
    identifier: str | None = Query(default=None, description="11-digit taxpayer identifier"),
    cpf: str | None = Query(default=None, description="Alias of identifier"),
) -> str | None:
    """
    Return the identifier from either accepted query parameter.

    Format validation happens in the tracking service so that every caller,
    not only HTTP, gets the same rules.
    """

    return identifier if identifier is not None else cpf
