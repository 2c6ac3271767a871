"""Ingestion of the complaint sheet: fetching, row parsing, mapping, reconciliation."""
from complaint_dashboard.ingestion.fetcher import (
    FetchError,
    SheetSource,
    fetch_csv,
    fetch_sources,
    sources_from_settings,
)
from complaint_dashboard.ingestion.mapping import (
    map_primary_row,
    map_secondary_row,
    parse_primary,
    parse_secondary,
)
from complaint_dashboard.ingestion.reconcile import reconcile
from complaint_dashboard.ingestion.rows import parse_rows, split_line
from complaint_dashboard.ingestion.status import classify_step

__all__ = [
    "FetchError",
    "SheetSource",
    "classify_step",
    "fetch_csv",
    "fetch_sources",
    "map_primary_row",
    "map_secondary_row",
    "parse_primary",
    "parse_rows",
    "parse_secondary",
    "reconcile",
    "sources_from_settings",
    "split_line",
]
