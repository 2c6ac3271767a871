"""Command line entry point: load the complaint sheet and export a view."""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from complaint_dashboard.core.config import DashboardSettings
from complaint_dashboard.core.logging import configure_logging
from complaint_dashboard.core.models import SORTABLE_FIELDS, Complaint
from complaint_dashboard.ingestion.fetcher import FetchError, fetch_sources, sources_from_settings
from complaint_dashboard.processing.filtering import STATUS_FILTERS, summarize
from complaint_dashboard.processing.pipeline import build_collection, derive_view
from complaint_dashboard.processing.sorting import SORT_ORDERS
from complaint_dashboard.reporting.sinks import write_csv, write_excel
from complaint_dashboard.reporting.templates import complaints_to_display_rows


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI entry point."""

    parser = argparse.ArgumentParser(description="Load market complaints and export a filtered view")
    parser.add_argument(
        "--primary-file",
        type=Path,
        help="Read the tasks extract from a local CSV file instead of the sheet",
    )
    parser.add_argument(
        "--secondary-file",
        type=Path,
        help="Read the completed tasks extract from a local CSV file instead of the sheet",
    )
    parser.add_argument("--sort-key", choices=SORTABLE_FIELDS, default="id")
    parser.add_argument("--order", choices=SORT_ORDERS, default="asc")
    parser.add_argument("--status", choices=STATUS_FILTERS, default="all")
    parser.add_argument("--country", help="Title-cased country to keep, e.g. 'United Kingdom'")
    parser.add_argument("--complaint-type", help="Title-cased complaint type to keep")
    parser.add_argument("--search", help="Case-insensitive text to look for in any field")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("output/complaints.csv"),
        help="CSV file to write the view to",
    )
    parser.add_argument(
        "--sink",
        choices=["csv", "excel"],
        default="csv",
        help="Also write an Excel workbook when set to excel",
    )
    parser.add_argument(
        "--excel-output",
        type=Path,
        default=Path("output/complaints.xlsx"),
        help="Excel file to write when --sink=excel",
    )
    return parser


def load_complaints(args: argparse.Namespace) -> List[Complaint]:
    """Read both extracts from disk when given, otherwise fetch them."""

    if bool(args.primary_file) != bool(args.secondary_file):
        raise SystemExit("--primary-file and --secondary-file must be given together")

    if args.primary_file:
        primary_text = args.primary_file.read_text(encoding="utf-8")
        secondary_text = args.secondary_file.read_text(encoding="utf-8")
    else:
        settings = DashboardSettings.from_env()
        primary, secondary = sources_from_settings(settings)
        primary_text, secondary_text = fetch_sources(primary, secondary, timeout=settings.fetch_timeout)
    return build_collection(primary_text, secondary_text)


def main(argv: Optional[List[str]] = None) -> int:
    """Entrypoint for exporting complaints from the command line."""

    configure_logging()
    args = build_parser().parse_args(argv)
    try:
        complaints = load_complaints(args)
    except FetchError as exc:
        print(f"Failed to fetch data. {exc}", file=sys.stderr)
        return 1

    view = derive_view(
        complaints,
        sort_key=args.sort_key,
        order=args.order,
        status=args.status,
        country=args.country,
        complaint_type=args.complaint_type,
        search_term=args.search,
    )
    rows = complaints_to_display_rows(view)
    write_csv(rows, args.output)
    if args.sink == "excel":
        write_excel(rows, args.excel_output)

    counts = summarize(complaints)
    print(
        f"{counts['total']} complaints ({counts['in_progress']} in progress, {counts['closed']} closed); "
        f"wrote {len(rows)} rows to {args.output}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
