"""Reconciliation keeps one record per id, preferring the tasks extract."""
from complaint_dashboard.core.models import STATUS_CLOSED, Complaint
from complaint_dashboard.ingestion.reconcile import reconcile


def test_primary_records_win_on_shared_ids():
    primary = [Complaint(id="1", step="Open"), Complaint(id="2", step="Open")]
    secondary = [
        Complaint(id="2", step="Closed", status=STATUS_CLOSED),
        Complaint(id="3", step="Closed", status=STATUS_CLOSED),
    ]

    merged = reconcile(primary, secondary)

    assert [complaint.id for complaint in merged] == ["1", "2", "3"]
    assert merged[1] is primary[1]
    assert merged[2] is secondary[1]


def test_reconcile_with_empty_sides():
    only = [Complaint(id="1")]

    assert reconcile([], only) == only
    assert reconcile(only, []) == only
    assert reconcile([], []) == []


def test_reconciled_sample_has_unique_ids(complaints):
    ids = [complaint.id for complaint in complaints]

    assert ids == ["101", "7", "A-12", "55"]
    assert len(ids) == len(set(ids))
    shared = next(complaint for complaint in complaints if complaint.id == "7")
    assert shared.full_name == "Tom Smith, Jr."
    assert shared.step == "Awaiting parts"
