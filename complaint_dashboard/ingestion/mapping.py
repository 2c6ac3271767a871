"""Map rows from the two sheet extracts onto :class:`Complaint` records.

The primary extract (columns A to P of the sheet) holds every tracked
complaint with its planned date and current step. The secondary extract
(columns Q to W) lists complaints that were already closed and carries a
smaller set of columns. Both share the same identity space in column 0.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from complaint_dashboard.core.models import NOT_AVAILABLE, STATUS_CLOSED, Complaint
from complaint_dashboard.ingestion.rows import parse_rows
from complaint_dashboard.ingestion.status import classify_step

logger = logging.getLogger(__name__)

RowMapper = Callable[[Sequence[str]], Optional[Complaint]]

PRIMARY_COLUMNS = {
    "id": 0,
    "planned_date": 1,
    "step": 3,
    "step_code": 5,
    "full_name": 6,
    "contact": 7,
    "signature": 8,
    "country": 9,
    "improvement_photo_url": 10,
    "status_link": 11,
    "notes": 14,
    "equipment_name": 15,
}

SECONDARY_COLUMNS = {
    "id": 0,
    "full_name": 1,
    "signature": 2,
    "country": 3,
    "equipment_name": 4,
    "improvement_photo_url": 5,
    "notes": 6,
}

CLOSED_STEP_LABEL = "Closed"


def _cell(row: Sequence[str], index: int) -> str:
    return row[index] if index < len(row) else ""


def _extract(row: Sequence[str], columns: dict) -> dict:
    values = {field: _cell(row, index) for field, index in columns.items()}
    values["notes"] = values.get("notes") or NOT_AVAILABLE
    return values


def map_primary_row(row: Sequence[str]) -> Optional[Complaint]:
    """Build a complaint from a primary-extract row, or ``None`` without an id."""

    if not _cell(row, 0):
        return None
    values = _extract(row, PRIMARY_COLUMNS)
    return Complaint(**values, status=classify_step(values["step"]))


def map_secondary_row(row: Sequence[str]) -> Optional[Complaint]:
    """Build a closed complaint from a secondary-extract row."""

    if not _cell(row, 0):
        return None
    values = _extract(row, SECONDARY_COLUMNS)
    return Complaint(**values, step=CLOSED_STEP_LABEL, status=STATUS_CLOSED)


def map_rows(rows: Iterable[Sequence[str]], mapper: RowMapper) -> List[Complaint]:
    """Apply ``mapper`` to every row, keeping input order and dropping rejects."""

    complaints: List[Complaint] = []
    dropped = 0
    for row in rows:
        complaint = mapper(row)
        if complaint is None:
            dropped += 1
            continue
        complaints.append(complaint)

    if dropped:
        logger.debug("Dropped %d rows without a complaint id", dropped)
    return complaints


def parse_primary(text: str) -> List[Complaint]:
    """Parse the raw primary CSV export into complaints."""

    return map_rows(parse_rows(text), map_primary_row)


def parse_secondary(text: str) -> List[Complaint]:
    """Parse the raw closed-complaints CSV export into complaints."""

    return map_rows(parse_rows(text), map_secondary_row)
