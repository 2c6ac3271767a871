"""Pytest configuration to make the local package importable without installation."""
import sys
from pathlib import Path
from typing import List

import pytest

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from complaint_dashboard.core.models import Complaint
from complaint_dashboard.processing.pipeline import build_collection

PRIMARY_HEADER = (
    '"ID","Planned Date","Owner","Step","Progress","Step Code","Full Name","Contact",'
    '"Signature","Country","Improvement Photo","Status Link","Reviewer","Closed On",'
    '"Complaint Type","Equipment"'
)

SECONDARY_HEADER = '"ID","Full Name","Signature","Country","Equipment","Improvement Photo","Complaint Type"'


@pytest.fixture
def primary_csv() -> str:
    """Tasks extract with a completed row, a quoted comma, a blank id, and a bad date."""

    return "\n".join(
        [
            PRIMARY_HEADER,
            '"101","05/03/24","QA","Investigation Complete","100%","S4","Jane Doe","Root cause found",'
            '"signed","germany","https://example.com/p/101","https://example.com/s/101","","",'
            '"Packaging Defect","Mixer-900"',
            '"7","12/01/2024","QA","Awaiting parts","40%","S2","Tom Smith, Jr.","Waiting on supplier",'
            '"","GERMANY","na","NA","","","packaging defect","Filler-200"',
            '"","01/01/24","QA","Open","0%","S1","Nobody","","","France","","","","","Labeling","Capper-10"',
            '"A-12","31/02/24","QA","","0%","S1","Ana Lima","","","brazil","","","","","","Capper-10"',
        ]
    )


@pytest.fixture
def secondary_csv() -> str:
    """Completed extract where id 7 duplicates a row from the tasks extract."""

    return "\n".join(
        [
            SECONDARY_HEADER,
            '"7","Old Name","yes","Germany","Filler-200","https://example.com/p/7","Labeling"',
            '"55","Lee Chen","yes","united kingdom","Mixer-900","https://example.com/p/55","Foreign Matter"',
            '"","Ghost","","Spain","","",""',
        ]
    )


@pytest.fixture
def complaints(primary_csv: str, secondary_csv: str) -> List[Complaint]:
    """The reconciled collection built from both sample extracts."""

    return build_collection(primary_csv, secondary_csv)


@pytest.fixture
def write_extracts(tmp_path: Path, primary_csv: str, secondary_csv: str):
    """Write both sample extracts to disk and return their paths."""

    def _write() -> tuple[Path, Path]:
        primary_path = tmp_path / "tasks.csv"
        secondary_path = tmp_path / "completed.csv"
        primary_path.write_text(primary_csv, encoding="utf-8")
        secondary_path.write_text(secondary_csv, encoding="utf-8")
        return primary_path, secondary_path

    return _write
