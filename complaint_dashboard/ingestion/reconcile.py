"""Merge the primary and closed-complaint collections into one."""
from __future__ import annotations

from typing import Iterable, List

from complaint_dashboard.core.models import Complaint


def reconcile(primary: Iterable[Complaint], secondary: Iterable[Complaint]) -> List[Complaint]:
    """Return every primary complaint followed by secondary ones with unseen ids.

    A complaint present in both extracts keeps its primary version.
    """

    merged = list(primary)
    primary_ids = {complaint.id for complaint in merged}
    merged.extend(complaint for complaint in secondary if complaint.id not in primary_ids)
    return merged
