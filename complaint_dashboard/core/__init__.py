"""Core building blocks for the complaint dashboard package."""
from complaint_dashboard.core.config import DashboardSettings, get_config_value, load_env_file
from complaint_dashboard.core.logging import configure_logging
from complaint_dashboard.core.models import (
    NOT_AVAILABLE,
    SORTABLE_FIELDS,
    STATUS_CLOSED,
    STATUS_IN_PROGRESS,
    Complaint,
)

__all__ = [
    "Complaint",
    "DashboardSettings",
    "NOT_AVAILABLE",
    "SORTABLE_FIELDS",
    "STATUS_CLOSED",
    "STATUS_IN_PROGRESS",
    "configure_logging",
    "get_config_value",
    "load_env_file",
]
