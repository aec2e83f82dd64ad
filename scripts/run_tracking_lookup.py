"""
Run one tracking lookup from CLI.
"""

from __future__ import annotations

import argparse
import json
import logging

from parcel_tracker.schemas.tracking import TrackingErrorResponse, render_outcome
from parcel_tracker.services.tracking_service import build_tracking_service


def main() -> int:
    parser = argparse.ArgumentParser(description="Look up shipments in transit for a CPF.")
    parser.add_argument("identifier", help="11-digit taxpayer identifier.")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        help="Logging level for scraper events.",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.strip().upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    service = build_tracking_service()
    try:
        outcome = service.track(args.identifier)
    except ValueError as exc:
        print(json.dumps(TrackingErrorResponse(error=str(exc)).model_dump(exclude_none=True), indent=2))
        return 2

    status_code, body = render_outcome(outcome)
    print(json.dumps(body.model_dump(exclude_none=status_code != 200), indent=2, ensure_ascii=False))
    return 0 if status_code == 200 else 1


if __name__ == "__main__":
    raise SystemExit(main())
