"""End-to-end derivation of the displayed complaint list."""
from complaint_dashboard.processing.pipeline import build_collection, derive_view


def _ids(complaints):
    return [complaint.id for complaint in complaints]


def test_build_collection_logs_summary(primary_csv, secondary_csv, caplog):
    caplog.set_level("INFO")

    complaints = build_collection(primary_csv, secondary_csv)

    assert len(complaints) == 4
    assert any("1 duplicates skipped" in message for message in caplog.messages)


def test_derive_view_sorts_then_filters(complaints):
    view = derive_view(complaints, sort_key="id", order="desc", status="all")

    assert _ids(view) == ["A-12", "101", "55", "7"]

    closed = derive_view(complaints, sort_key="id", order="asc", status="closed")
    assert _ids(closed) == ["55", "101"]


def test_derive_view_by_planned_date(complaints):
    view = derive_view(complaints, sort_key="planned_date", order="desc")

    assert _ids(view)[:2] == ["101", "7"]
    assert set(_ids(view)[2:]) == {"A-12", "55"}


def test_derive_view_does_not_change_collection(complaints):
    before = list(complaints)

    derive_view(complaints, sort_key="country", order="desc", search_term="germany")

    assert complaints == before
