"""Data model for complaints reconciled from both sheet extracts."""
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

STATUS_IN_PROGRESS = "in-progress"
STATUS_CLOSED = "closed"
NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class Complaint:
    """A single complaint, whichever extract it was read from."""

    id: str
    planned_date: str = ""
    step: str = ""
    step_code: str = ""
    full_name: str = ""
    signature: str = ""
    contact: str = ""
    country: str = ""
    improvement_photo_url: str = ""
    status_link: str = ""
    notes: str = NOT_AVAILABLE
    equipment_name: str = ""
    status: str = STATUS_IN_PROGRESS

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain dictionary representation for CSV serialization."""

        return asdict(self)


SORTABLE_FIELDS = tuple(field.name for field in fields(Complaint))
