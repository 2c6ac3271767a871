"""Configuration lookups for the sheet sources and refresh cadence."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SHEET_ID = "1fmUWIqjjU1ftvIhddTtdjPEzylnj7C7ay0UremtPvZI"
DEFAULT_SHEET_NAME = "DB_Format"
DEFAULT_PRIMARY_RANGE = "A1:P"
DEFAULT_SECONDARY_RANGE = "Q1:W"
DEFAULT_REFRESH_SECONDS = 60.0
DEFAULT_FETCH_TIMEOUT = 15.0
DEFAULT_ENV_FILE = Path("secrets/complaints.env")
_ENV_LOADED = False


def get_config_value(key: str, default: str = "") -> str:
    """Get configuration value from Streamlit secrets or environment variables.

    Checks Streamlit secrets first (for cloud deployment), then falls back
    to environment variables (for local runs and the CLI).
    """
    try:
        import streamlit as st
        if hasattr(st, "secrets") and key in st.secrets:
            return str(st.secrets[key])
    except (ImportError, FileNotFoundError, KeyError):
        pass

    return os.getenv(key, default)


def load_env_file(path: Path) -> None:
    """Load environment variables from a file if it exists."""
    if not path.exists():
        return

    try:
        with path.open(encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                key = key.strip()
                if not key or key in os.environ:
                    continue
                os.environ[key] = value.strip().strip('"').strip("'")
    except OSError as exc:
        logger.debug("Could not load env file %s: %s", path, exc)


def _ensure_env_file() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    _ENV_LOADED = True
    load_env_file(Path(os.getenv("COMPLAINTS_ENV_FILE", DEFAULT_ENV_FILE)))


def _float_value(key: str, default: float) -> float:
    raw = get_config_value(key, "")
    if not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class DashboardSettings:
    """Resolved settings for fetching and refreshing the complaint sheet."""

    sheet_id: str = DEFAULT_SHEET_ID
    sheet_name: str = DEFAULT_SHEET_NAME
    primary_range: str = DEFAULT_PRIMARY_RANGE
    secondary_range: str = DEFAULT_SECONDARY_RANGE
    refresh_seconds: float = DEFAULT_REFRESH_SECONDS
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        _ensure_env_file()
        return cls(
            sheet_id=get_config_value("COMPLAINTS_SHEET_ID", DEFAULT_SHEET_ID),
            sheet_name=get_config_value("COMPLAINTS_SHEET_NAME", DEFAULT_SHEET_NAME),
            primary_range=get_config_value("COMPLAINTS_PRIMARY_RANGE", DEFAULT_PRIMARY_RANGE),
            secondary_range=get_config_value("COMPLAINTS_SECONDARY_RANGE", DEFAULT_SECONDARY_RANGE),
            refresh_seconds=_float_value("COMPLAINTS_REFRESH_SECONDS", DEFAULT_REFRESH_SECONDS),
            fetch_timeout=_float_value("COMPLAINTS_FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT),
        )
