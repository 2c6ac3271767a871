"""Lifecycle status derived from the free-text step label."""
from complaint_dashboard.core.models import STATUS_CLOSED, STATUS_IN_PROGRESS


def classify_step(step: str) -> str:
    """Return ``closed`` when the step mentions "complete", else ``in-progress``."""

    if step and "complete" in step.lower():
        return STATUS_CLOSED
    return STATUS_IN_PROGRESS
