"""Compose parsing, reconciliation, sorting, and filtering."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from complaint_dashboard.core.models import Complaint
from complaint_dashboard.ingestion.mapping import parse_primary, parse_secondary
from complaint_dashboard.ingestion.reconcile import reconcile
from complaint_dashboard.processing.filtering import STATUS_ALL, filter_complaints
from complaint_dashboard.processing.sorting import sort_complaints

logger = logging.getLogger(__name__)


def build_collection(primary_text: str, secondary_text: str) -> List[Complaint]:
    """Turn both raw CSV exports into one de-duplicated complaint list."""

    primary = parse_primary(primary_text)
    secondary = parse_secondary(secondary_text)
    complaints = reconcile(primary, secondary)
    logger.info(
        "Reconciled %d complaints (%d tasks, %d completed tasks, %d duplicates skipped)",
        len(complaints),
        len(primary),
        len(secondary),
        len(primary) + len(secondary) - len(complaints),
    )
    return complaints


def derive_view(
    complaints: Iterable[Complaint],
    sort_key: str = "id",
    order: str = "asc",
    status: str = STATUS_ALL,
    country: Optional[str] = None,
    complaint_type: Optional[str] = None,
    search_term: Optional[str] = None,
) -> List[Complaint]:
    """Sort then filter ``complaints`` into the list shown to the user."""

    ordered = sort_complaints(complaints, key=sort_key, order=order)
    return filter_complaints(
        ordered,
        status=status,
        country=country,
        complaint_type=complaint_type,
        search_term=search_term,
    )
