"""Ingest, reconcile, and query market complaints from a shared Google Sheet."""
from complaint_dashboard.core import (
    Complaint,
    DashboardSettings,
    configure_logging,
)
from complaint_dashboard.ingestion import (
    FetchError,
    SheetSource,
    classify_step,
    fetch_sources,
    parse_primary,
    parse_rows,
    parse_secondary,
    reconcile,
)
from complaint_dashboard.processing import (
    ComplaintStore,
    build_collection,
    derive_view,
    filter_complaints,
    sort_complaints,
    summarize,
    unique_complaint_types,
    unique_countries,
)

__all__ = [
    "Complaint",
    "ComplaintStore",
    "DashboardSettings",
    "FetchError",
    "SheetSource",
    "build_collection",
    "classify_step",
    "configure_logging",
    "derive_view",
    "fetch_sources",
    "filter_complaints",
    "parse_primary",
    "parse_rows",
    "parse_secondary",
    "reconcile",
    "sort_complaints",
    "summarize",
    "unique_complaint_types",
    "unique_countries",
]
