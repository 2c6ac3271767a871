"""Logging setup and the messages emitted around refresh cycles."""
import logging

import pytest

from complaint_dashboard.core.logging import configure_logging
from complaint_dashboard.ingestion.fetcher import FetchError
from complaint_dashboard.processing.store import ComplaintStore


def test_configure_logging_uses_env_level(monkeypatch: pytest.MonkeyPatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    configure_logging()

    assert captured["level"] == "DEBUG"
    assert "%(name)s" in captured["format"]


def test_configure_logging_prefers_explicit_level(monkeypatch: pytest.MonkeyPatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    configure_logging("warning")

    assert captured["level"] == "WARNING"


def test_initial_load_failure_is_logged(caplog):
    def fetcher():
        raise FetchError("Please check if the Google Sheet is public")

    caplog.set_level("ERROR")
    with pytest.raises(FetchError):
        ComplaintStore(fetcher).refresh()

    assert "Initial load failed" in caplog.text


def test_successful_refresh_logs_count(primary_csv, secondary_csv, caplog):
    caplog.set_level("INFO")

    ComplaintStore(lambda: (primary_csv, secondary_csv)).refresh()

    assert any("Loaded 4 complaints" in message for message in caplog.messages)


def test_configure_logging_quiets_http_client(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    monkeypatch.delenv("LOG_HTTP_DEBUG", raising=False)
    urllib3_logger = logging.getLogger("urllib3")
    monkeypatch.setattr(urllib3_logger, "level", urllib3_logger.level)

    assert configure_logging("debug") == "DEBUG"
    assert urllib3_logger.level == logging.WARNING

    monkeypatch.setenv("LOG_HTTP_DEBUG", "1")
    configure_logging("debug")
    assert urllib3_logger.level == logging.DEBUG
