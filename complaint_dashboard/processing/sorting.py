"""Ordering of complaint collections for a requested column."""
from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from complaint_dashboard.core.models import SORTABLE_FIELDS, Complaint

SORT_ORDERS = ("asc", "desc")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_DIGITS = re.compile(r"[0-9]+")


def parse_leading_int(value: str) -> Optional[int]:
    """Return the integer at the start of ``value`` ("12b" -> 12), if any."""

    match = _LEADING_INT.match(value or "")
    return int(match.group(1)) if match else None


def parse_planned_date(value: str) -> Optional[datetime]:
    """Parse ``DD/MM/YY`` or ``DD/MM/YYYY`` into a UTC midnight datetime.

    Returns ``None`` for anything that is not exactly three numeric parts or
    that names a day the calendar does not have (31/02, 31/04, ...). Two
    digit years are taken to be in the 2000s.
    """

    if not value:
        return None
    parts = [part.strip() for part in value.split("/")]
    if len(parts) != 3 or not all(_DIGITS.fullmatch(part) for part in parts):
        return None

    day, month, year = (int(part) for part in parts)
    if year < 100:
        year += 2000
    try:
        return datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError:
        return None


def _id_sort_value(complaint: Complaint) -> float:
    number = parse_leading_int(complaint.id)
    return math.inf if number is None else number


def _validate(key: str, order: str) -> None:
    if key not in SORTABLE_FIELDS:
        raise ValueError(f"Unknown sort key {key!r}; expected one of {', '.join(SORTABLE_FIELDS)}")
    if order not in SORT_ORDERS:
        raise ValueError(f"Unknown sort order {order!r}; expected 'asc' or 'desc'")


def sort_complaints(
    complaints: Iterable[Complaint], key: str = "id", order: str = "asc"
) -> List[Complaint]:
    """Return a new list of complaints ordered by ``key``.

    Ids compare numerically, with ids lacking a leading number treated as
    infinitely large. Planned dates compare as calendar dates, and complaints
    without a valid date always come last whichever ``order`` is requested.
    Every other column compares as a case-sensitive string. Ties keep their
    input order.
    """

    _validate(key, order)
    reverse = order == "desc"
    items = list(complaints)

    if key == "id":
        return sorted(items, key=_id_sort_value, reverse=reverse)

    if key == "planned_date":
        dated = []
        undated = []
        for complaint in items:
            parsed = parse_planned_date(complaint.planned_date)
            if parsed is None:
                undated.append(complaint)
            else:
                dated.append((parsed, complaint))
        dated.sort(key=lambda pair: pair[0], reverse=reverse)
        return [complaint for _, complaint in dated] + undated

    return sorted(items, key=lambda complaint: getattr(complaint, key) or "", reverse=reverse)
