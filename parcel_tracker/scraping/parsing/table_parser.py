"""
BeautifulSoup-based extraction of the tracking results table.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

from parcel_tracker.domain.tracking import UNAVAILABLE, ShipmentRecord
from parcel_tracker.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)

MIN_CELLS_PER_ROW = 3


class TrackingTableParser:
    """
    Deterministic row extraction for the carrier results page.
    """

    @classmethod
    def parse(
        cls,
        *,
        html: str,
        row_selector: str = "table tbody tr",
    ) -> list[ShipmentRecord]:
        soup = BeautifulSoup(html, "html.parser")
        records: list[ShipmentRecord] = []
        for index, row in enumerate(soup.select(row_selector)):
            record = cls.parse_row(row=row, index=index)
            if record is not None:
                records.append(record)
        return records

    @classmethod
    def parse_row(cls, *, row: Tag, index: int = 0) -> ShipmentRecord | None:
        """
        Map one table row to a ShipmentRecord.

        Rows with fewer than three cells do not qualify. Blank cells fall back
        to the "Unavailable" sentinel instead of failing the batch.
        """

        cells = row.find_all("td")
        if len(cells) < MIN_CELLS_PER_ROW:
            if cells:
                log_event(
                    logger,
                    logging.DEBUG,
                    "tracking_row_skipped",
                    row_index=index,
                    cell_count=len(cells),
                )
            return None

        texts = [cls._clean_text(cell.get_text(" ", strip=True)) for cell in cells]
        degraded = [position for position, text in enumerate(texts[:3]) if not text]
        if degraded:
            log_event(
                logger,
                logging.WARNING,
                "tracking_row_degraded",
                row_index=index,
                blank_cells=degraded,
            )

        comments = texts[3] if len(texts) > 3 and texts[3] else None
        return ShipmentRecord(
            number=texts[0] or UNAVAILABLE,
            date_and_location=texts[1] or UNAVAILABLE,
            status=texts[2] or UNAVAILABLE,
            comments=comments,
        )

    @staticmethod
    def _clean_text(value: str) -> str:
        return re.sub(r"\s+", " ", value).strip()
