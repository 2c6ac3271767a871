"""Status, category, and free-text filters over complaint collections."""
from __future__ import annotations

import re
from dataclasses import astuple
from typing import Dict, Iterable, List, Optional

from complaint_dashboard.core.models import STATUS_CLOSED, STATUS_IN_PROGRESS, Complaint

STATUS_ALL = "all"
STATUS_FILTERS = (STATUS_ALL, STATUS_IN_PROGRESS, STATUS_CLOSED)

_WORD_START = re.compile(r"(^|\s)(\S)")


def to_title_case(value: Optional[str]) -> str:
    """Lowercase ``value`` and capitalize the first letter of each word."""

    if not value:
        return ""
    return _WORD_START.sub(lambda match: match.group(1) + match.group(2).upper(), value.lower())


def matches_search(complaint: Complaint, search_term: Optional[str]) -> bool:
    """Return True when any field of ``complaint`` contains ``search_term``."""

    if not search_term:
        return True
    needle = search_term.lower()
    return any(needle in str(value).lower() for value in astuple(complaint))


def _matches_category(value: str, selected: Optional[str]) -> bool:
    return not selected or to_title_case(value) == selected


def filter_complaints(
    complaints: Iterable[Complaint],
    status: str = STATUS_ALL,
    country: Optional[str] = None,
    complaint_type: Optional[str] = None,
    search_term: Optional[str] = None,
) -> List[Complaint]:
    """Return the complaints that pass every active filter, in input order.

    ``country`` and ``complaint_type`` are expected in title case, as produced
    by :func:`unique_countries` and :func:`unique_complaint_types`.
    """

    if status not in STATUS_FILTERS:
        raise ValueError(f"Unknown status filter {status!r}; expected one of {', '.join(STATUS_FILTERS)}")

    return [
        complaint
        for complaint in complaints
        if (status == STATUS_ALL or complaint.status == status)
        and _matches_category(complaint.country, country)
        and _matches_category(complaint.notes, complaint_type)
        and matches_search(complaint, search_term)
    ]


def _distinct_title_cased(values: Iterable[str]) -> List[str]:
    return sorted({to_title_case(value) for value in values if value})


def unique_countries(complaints: Iterable[Complaint]) -> List[str]:
    """Distinct countries, title-cased and sorted, for the country selector."""

    return _distinct_title_cased(complaint.country for complaint in complaints)


def unique_complaint_types(complaints: Iterable[Complaint]) -> List[str]:
    """Distinct complaint types, title-cased and sorted."""

    return _distinct_title_cased(complaint.notes for complaint in complaints)


def summarize(complaints: Iterable[Complaint]) -> Dict[str, int]:
    """Count all, in-progress, and closed complaints."""

    items = list(complaints)
    closed = len([complaint for complaint in items if complaint.status == STATUS_CLOSED])
    return {"total": len(items), "in_progress": len(items) - closed, "closed": closed}
