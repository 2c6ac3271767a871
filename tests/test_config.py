"""Settings resolution from environment variables and env files."""
import os
from pathlib import Path

import pytest

import complaint_dashboard.core.config as config
from complaint_dashboard.core.config import DashboardSettings, load_env_file


@pytest.fixture(autouse=True)
def _skip_env_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "_ENV_LOADED", True)
    for key in (
        "COMPLAINTS_SHEET_ID",
        "COMPLAINTS_SHEET_NAME",
        "COMPLAINTS_PRIMARY_RANGE",
        "COMPLAINTS_SECONDARY_RANGE",
        "COMPLAINTS_REFRESH_SECONDS",
        "COMPLAINTS_FETCH_TIMEOUT",
    ):
        monkeypatch.delenv(key, raising=False)


def test_defaults_match_published_sheet():
    settings = DashboardSettings.from_env()

    assert settings.sheet_id == config.DEFAULT_SHEET_ID
    assert settings.sheet_name == "DB_Format"
    assert settings.primary_range == "A1:P"
    assert settings.secondary_range == "Q1:W"
    assert settings.refresh_seconds == 60.0


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("COMPLAINTS_SHEET_ID", "other-sheet")
    monkeypatch.setenv("COMPLAINTS_REFRESH_SECONDS", "30")
    monkeypatch.setenv("COMPLAINTS_FETCH_TIMEOUT", "2.5")

    settings = DashboardSettings.from_env()

    assert settings.sheet_id == "other-sheet"
    assert settings.refresh_seconds == 30.0
    assert settings.fetch_timeout == 2.5


@pytest.mark.parametrize("raw", ["soon", "0", "-5"])
def test_invalid_refresh_interval_is_rejected(monkeypatch: pytest.MonkeyPatch, raw: str):
    monkeypatch.setenv("COMPLAINTS_REFRESH_SECONDS", raw)

    with pytest.raises(ValueError, match="COMPLAINTS_REFRESH_SECONDS"):
        DashboardSettings.from_env()


def test_load_env_file_does_not_override_existing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    env_file = tmp_path / "complaints.env"
    env_file.write_text(
        "# local overrides\nCOMPLAINTS_SHEET_NAME='Archive'\nCOMPLAINTS_SHEET_ID=from-file\nnot a pair\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("COMPLAINTS_SHEET_ID", "from-env")

    load_env_file(env_file)

    assert os.environ["COMPLAINTS_SHEET_NAME"] == "Archive"
    assert os.environ["COMPLAINTS_SHEET_ID"] == "from-env"


def test_load_env_file_ignores_missing_file(tmp_path: Path):
    load_env_file(tmp_path / "missing.env")
