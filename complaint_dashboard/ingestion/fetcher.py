"""Download both sheet extracts as CSV text."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import quote

import requests

from complaint_dashboard.core.config import DEFAULT_FETCH_TIMEOUT, DashboardSettings

logger = logging.getLogger(__name__)

GVIZ_CSV_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv&sheet={sheet}&range={cell_range}"
PRIVATE_SHEET_MARKER = "gid must be a number"


class FetchError(RuntimeError):
    """Raised when a refresh cycle cannot obtain usable CSV text."""


@dataclass(frozen=True)
class SheetSource:
    """One cell range of a published Google Sheet, exported as CSV."""

    sheet_id: str
    sheet_name: str
    cell_range: str
    label: str = "sheet"

    @property
    def url(self) -> str:
        return GVIZ_CSV_URL.format(
            sheet_id=self.sheet_id,
            sheet=quote(self.sheet_name, safe=""),
            cell_range=self.cell_range,
        )


def sources_from_settings(settings: DashboardSettings) -> Tuple[SheetSource, SheetSource]:
    """Return the primary and closed-complaint sources described by ``settings``."""

    primary = SheetSource(settings.sheet_id, settings.sheet_name, settings.primary_range, label="tasks")
    secondary = SheetSource(
        settings.sheet_id, settings.sheet_name, settings.secondary_range, label="completed tasks"
    )
    return primary, secondary


def check_csv_payload(text: str) -> str:
    """Reject payloads that are an error page rather than CSV data."""

    if PRIVATE_SHEET_MARKER in text:
        raise FetchError(
            "Please check if the Google Sheet is public ('Anyone with the link can view')."
        )
    return text


def fetch_csv(
    source: SheetSource,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> str:
    """Fetch the CSV export of ``source`` and return its text."""

    client = session or requests
    logger.debug("Fetching %s from %s", source.label, source.url)
    try:
        response = client.get(source.url, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"Request for {source.label} failed: {exc}") from exc

    if not response.ok:
        raise FetchError(f"Network response for {source.label} was not ok ({response.status_code})")
    return check_csv_payload(response.text)


def fetch_sources(
    primary: SheetSource,
    secondary: SheetSource,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> Tuple[str, str]:
    """Fetch both extracts concurrently; either failure fails the whole fetch."""

    with ThreadPoolExecutor(max_workers=2) as pool:
        primary_future = pool.submit(fetch_csv, primary, session, timeout)
        secondary_future = pool.submit(fetch_csv, secondary, session, timeout)
        primary_text = primary_future.result()
        secondary_text = secondary_future.result()

    logger.info(
        "Fetched %d bytes of tasks and %d bytes of completed tasks",
        len(primary_text),
        len(secondary_text),
    )
    return primary_text, secondary_text
