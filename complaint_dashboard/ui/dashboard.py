"""Streamlit dashboard for tracking market complaints from the shared sheet."""
import logging
from pathlib import Path
from typing import List

import streamlit as st

# Allow running via "streamlit run complaint_dashboard/ui/dashboard.py" without
# installing the package by ensuring the repository root is on ``sys.path``.
if __package__ in {None, ""}:
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[2]))

from complaint_dashboard.core.config import DashboardSettings
from complaint_dashboard.core.logging import configure_logging
from complaint_dashboard.core.models import SORTABLE_FIELDS, Complaint
from complaint_dashboard.ingestion.fetcher import FetchError
from complaint_dashboard.processing.filtering import (
    STATUS_FILTERS,
    summarize,
    unique_complaint_types,
    unique_countries,
)
from complaint_dashboard.processing.pipeline import derive_view
from complaint_dashboard.processing.store import ComplaintStore
from complaint_dashboard.reporting.templates import (
    complaint_details,
    complaints_to_display_rows,
    initials,
)

logger = logging.getLogger(__name__)

STATUS_LABELS = {"all": "Total", "in-progress": "In Progress", "closed": "Closed"}
SORT_LABELS = {
    "id": "Complaint ID",
    "step": "Status / Step",
    "full_name": "Submitted By",
    "country": "Country",
    "notes": "Complaint Type",
    "equipment_name": "Equipment/Machine",
    "planned_date": "Planned Date",
    "improvement_photo_url": "Improvement",
    "status_link": "Status Link",
}


def _rerun_app() -> None:
    """Trigger a Streamlit rerun, compatible with newer and older APIs."""

    rerun = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if not rerun:
        raise RuntimeError("Streamlit does not expose a rerun helper.")
    rerun()


@st.cache_resource(show_spinner="Loading dashboard from Google Sheet...")
def _shared_store(_settings: DashboardSettings) -> ComplaintStore:
    """Create one store per process; every session reads from its single poller.

    A failed first load raises and is not cached, so the next run retries.
    """

    store = ComplaintStore.from_settings(_settings)
    store.refresh()
    store.start_polling(_settings.refresh_seconds)
    return store


def _clear_filters() -> None:
    st.session_state["search_term"] = ""
    st.session_state["country_filter"] = ""
    st.session_state["complaint_type_filter"] = ""


def _summary_metrics(complaints: List[Complaint]) -> None:
    counts = summarize(complaints)
    columns = st.columns(3)
    columns[0].metric("Total Complaints", counts["total"])
    columns[1].metric("In Progress", counts["in_progress"])
    columns[2].metric("Closed", counts["closed"])


def _detail_panel(complaint: Complaint) -> None:
    with st.expander(f"{initials(complaint.full_name)} · Complaint {complaint.id}"):
        details = complaint_details(complaint)
        if not details:
            st.caption("No additional details recorded.")
        for item in details:
            st.markdown(f"**{item['label']}:** {item['value']}")


def _render_complaints(store: ComplaintStore) -> None:
    """Render everything that depends on the current complaint collection."""

    complaints = store.complaints
    header_cols = st.columns([3, 1])
    with header_cols[0]:
        if store.last_refresh:
            st.caption(f"Last updated: {store.last_refresh.astimezone().strftime('%H:%M:%S')}")
        if store.last_error:
            st.warning(f"Showing previously loaded data. {store.last_error}")
    with header_cols[1]:
        if st.button("Refresh", disabled=store.refreshing):
            logger.info("Manual refresh requested")
            store.refresh()
            _rerun_app()

    _summary_metrics(complaints)

    countries = ["", *unique_countries(complaints)]
    complaint_types = ["", *unique_complaint_types(complaints)]
    for key in ("search_term", "country_filter", "complaint_type_filter"):
        st.session_state.setdefault(key, "")
    # A refresh can drop the value a selector was set to.
    if st.session_state["country_filter"] not in countries:
        st.session_state["country_filter"] = ""
    if st.session_state["complaint_type_filter"] not in complaint_types:
        st.session_state["complaint_type_filter"] = ""

    filter_cols = st.columns([2, 1.3, 1.3, 1])
    with filter_cols[0]:
        search_term = st.text_input("Search all complaints...", key="search_term")
    with filter_cols[1]:
        country = st.selectbox(
            "Country",
            options=countries,
            format_func=lambda value: value or "All Countries",
            key="country_filter",
        )
    with filter_cols[2]:
        complaint_type = st.selectbox(
            "Complaint Type",
            options=complaint_types,
            format_func=lambda value: value or "All Complaint Types",
            key="complaint_type_filter",
        )
    with filter_cols[3]:
        st.button(
            "Clear Filters",
            on_click=_clear_filters,
            disabled=not (search_term or country or complaint_type),
        )

    control_cols = st.columns([2, 1.3, 1])
    with control_cols[0]:
        status = st.radio(
            "Status",
            options=list(STATUS_FILTERS),
            format_func=STATUS_LABELS.get,
            horizontal=True,
            key="status_filter",
        )
    with control_cols[1]:
        sort_key = st.selectbox(
            "Sort by",
            options=[key for key in SORT_LABELS if key in SORTABLE_FIELDS],
            format_func=SORT_LABELS.get,
            key="sort_key",
        )
    with control_cols[2]:
        order = st.radio("Order", options=["asc", "desc"], horizontal=True, key="sort_order")

    view = derive_view(
        complaints,
        sort_key=sort_key,
        order=order,
        status=status,
        country=country or None,
        complaint_type=complaint_type or None,
        search_term=search_term or None,
    )

    if not view:
        st.info("No complaints found. Try adjusting your search or filter.")
        return

    st.dataframe(
        complaints_to_display_rows(view),
        use_container_width=True,
        hide_index=True,
    )
    st.markdown("#### Complaint details")
    for complaint in view:
        _detail_panel(complaint)


def main() -> None:
    """Launch the complaint dashboard."""

    configure_logging()
    st.set_page_config(page_title="Market Complaint Dashboard", layout="wide")
    st.title("Market Complaint Dashboard")
    st.caption("Real-time tracking and management of market complaints.")

    settings = DashboardSettings.from_env()
    try:
        store = _shared_store(settings)
    except FetchError as exc:
        st.error(f"Failed to fetch data. {exc}")
        st.stop()

    # Re-render on the refresh cadence so background refreshes reach the page.
    live_view = st.fragment(run_every=settings.refresh_seconds)(_render_complaints)
    live_view(store)


if __name__ == "__main__":
    main()
