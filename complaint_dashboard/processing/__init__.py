"""Derived views over the reconciled complaint collection."""
from complaint_dashboard.processing.filtering import (
    STATUS_ALL,
    filter_complaints,
    matches_search,
    summarize,
    to_title_case,
    unique_complaint_types,
    unique_countries,
)
from complaint_dashboard.processing.pipeline import build_collection, derive_view
from complaint_dashboard.processing.sorting import (
    parse_leading_int,
    parse_planned_date,
    sort_complaints,
)
from complaint_dashboard.processing.store import ComplaintStore

__all__ = [
    "STATUS_ALL",
    "ComplaintStore",
    "build_collection",
    "derive_view",
    "filter_complaints",
    "matches_search",
    "parse_leading_int",
    "parse_planned_date",
    "sort_complaints",
    "summarize",
    "to_title_case",
    "unique_complaint_types",
    "unique_countries",
]
