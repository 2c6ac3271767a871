"""Display rows and file exports for complaint views."""
from complaint_dashboard.reporting.sinks import ensure_output_dir, write_csv, write_excel
from complaint_dashboard.reporting.templates import (
    DISPLAY_HEADERS,
    complaint_details,
    complaint_to_display_row,
    complaints_to_display_rows,
    format_planned_date,
    initials,
)

__all__ = [
    "DISPLAY_HEADERS",
    "complaint_details",
    "complaint_to_display_row",
    "complaints_to_display_rows",
    "ensure_output_dir",
    "format_planned_date",
    "initials",
    "write_csv",
    "write_excel",
]
