"""File sinks for exporting the displayed complaint rows."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, Iterable, List

from complaint_dashboard.reporting.templates import DISPLAY_HEADERS


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def write_csv(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write display rows to a CSV file with consistent headers.

    An empty view still produces a header-only file so a previous export is
    never left behind.
    """

    rows = list(rows)
    ensure_output_dir(output_path)
    with output_path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=DISPLAY_HEADERS)
        writer.writeheader()
        writer.writerows(rows)


def write_excel(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write display rows to an Excel workbook using openpyxl."""

    from openpyxl import Workbook

    ensure_output_dir(output_path)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "complaints"
    headers: List[str] = list(DISPLAY_HEADERS)
    sheet.append(headers)
    for row in rows:
        sheet.append([row.get(header, "") for header in headers])
    workbook.save(output_path)
