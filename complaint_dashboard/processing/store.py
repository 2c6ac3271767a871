"""Hold the last good complaint collection across refresh cycles."""
from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from complaint_dashboard.core.config import DashboardSettings
from complaint_dashboard.core.models import Complaint
from complaint_dashboard.ingestion.fetcher import FetchError, fetch_sources, sources_from_settings
from complaint_dashboard.processing.pipeline import build_collection

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Tuple[str, str]]


def settings_fetcher(settings: DashboardSettings) -> Fetcher:
    """Return a fetch function bound to the sheet sources in ``settings``."""

    primary, secondary = sources_from_settings(settings)

    def _fetch() -> Tuple[str, str]:
        return fetch_sources(primary, secondary, timeout=settings.fetch_timeout)

    return _fetch


class ComplaintStore:
    """Owns the current complaint collection and replaces it on each refresh.

    A refresh either swaps in a completely new collection or leaves the
    previous one untouched. Refreshes never overlap: a trigger that arrives
    while another refresh is running is dropped.
    """

    def __init__(self, fetcher: Fetcher) -> None:
        self._fetcher = fetcher
        self._complaints: Optional[List[Complaint]] = None
        self._refresh_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._poller: Optional[threading.Thread] = None
        self.last_refresh: Optional[datetime] = None
        self.last_error: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: DashboardSettings) -> "ComplaintStore":
        return cls(settings_fetcher(settings))

    @property
    def complaints(self) -> List[Complaint]:
        return list(self._complaints or [])

    @property
    def loaded(self) -> bool:
        return self._complaints is not None

    @property
    def refreshing(self) -> bool:
        return self._refresh_lock.locked()

    def refresh(self) -> bool:
        """Fetch and rebuild the collection.

        Returns True when a new collection was installed. Failures on the
        first load raise :class:`FetchError`; later failures are logged and
        the previous collection is kept.
        """

        if not self._refresh_lock.acquire(blocking=False):
            logger.debug("Refresh already in progress; skipping trigger")
            return False

        try:
            initial_load = self._complaints is None
            try:
                primary_text, secondary_text = self._fetcher()
                complaints = build_collection(primary_text, secondary_text)
            except FetchError as exc:
                self.last_error = f"Failed to fetch data. {exc}"
                if initial_load:
                    logger.error("Initial load failed: %s", exc)
                    raise
                logger.warning("Background refresh failed, keeping %d complaints: %s", len(self._complaints), exc)
                return False

            self._complaints = complaints
            self.last_refresh = datetime.now(timezone.utc)
            self.last_error = None
            logger.info("Loaded %d complaints", len(complaints))
            return True
        finally:
            self._refresh_lock.release()

    def start_polling(self, interval: float) -> None:
        """Refresh every ``interval`` seconds on a background thread."""

        if self._poller and self._poller.is_alive():
            return
        self._stop_event.clear()
        self._poller = threading.Thread(
            target=self._poll, args=(interval,), name="complaint-refresh", daemon=True
        )
        self._poller.start()

    def stop_polling(self) -> None:
        self._stop_event.set()
        if self._poller:
            self._poller.join()
            self._poller = None

    def _poll(self, interval: float) -> None:
        while not self._stop_event.wait(interval):
            try:
                self.refresh()
            except FetchError:
                # Still no data; the next tick retries the initial load.
                continue
            except Exception:
                logger.exception("Unexpected error during background refresh")
