"""Map complaints onto the labelled columns shown in the dashboard table."""
from typing import Any, Dict, Iterable, List

from complaint_dashboard.core.models import NOT_AVAILABLE, Complaint
from complaint_dashboard.processing.sorting import parse_planned_date

DISPLAY_HEADERS = [
    "Complaint ID",
    "Status / Step",
    "Submitted By",
    "Country",
    "Complaint Type",
    "Equipment/Machine",
    "Planned Date",
    "Improvement",
    "Status Link",
    "Status",
]


def _or_na(value: str | None) -> str:
    return value or NOT_AVAILABLE


def _has_link(value: str | None) -> bool:
    return bool(value) and value.strip().lower() != "na"


def format_planned_date(raw: str | None) -> str:
    if not raw:
        return NOT_AVAILABLE
    parsed = parse_planned_date(raw)
    return parsed.strftime("%d/%m/%Y") if parsed else "Invalid Date"


def initials(name: str | None) -> str:
    """Return avatar initials: first and last word, or "?" for no name."""

    if not name:
        return "?"
    words = name.split(" ")
    if len(words) == 1:
        return words[0][:1].upper()
    return (words[0][:1] + words[-1][:1]).upper()


def complaint_to_display_row(complaint: Complaint) -> Dict[str, Any]:
    """Convert a complaint into the table row dictionary."""

    return {
        "Complaint ID": _or_na(complaint.id),
        "Status / Step": _or_na(complaint.step),
        "Submitted By": _or_na(complaint.full_name),
        "Country": _or_na(complaint.country),
        "Complaint Type": _or_na(complaint.notes),
        "Equipment/Machine": _or_na(complaint.equipment_name),
        "Planned Date": format_planned_date(complaint.planned_date),
        "Improvement": complaint.improvement_photo_url if _has_link(complaint.improvement_photo_url) else "No Document",
        "Status Link": complaint.status_link if _has_link(complaint.status_link) else NOT_AVAILABLE,
        "Status": complaint.status,
    }


def complaints_to_display_rows(complaints: Iterable[Complaint]) -> List[Dict[str, Any]]:
    return [complaint_to_display_row(complaint) for complaint in complaints]


def complaint_details(complaint: Complaint) -> List[Dict[str, str]]:
    """Label/value pairs for the expandable detail panel, skipping blanks."""

    details = [
        ("Complaint ID", complaint.id),
        ("Step Code", complaint.step_code),
        ("Signature Provided", "Yes" if complaint.signature else "No"),
        ("Full Step Description", complaint.contact),
        ("Complaint Type", complaint.notes),
        ("Equipment/Machine", complaint.equipment_name),
    ]
    return [
        {"label": label, "value": value}
        for label, value in details
        if value and value != NOT_AVAILABLE
    ]
