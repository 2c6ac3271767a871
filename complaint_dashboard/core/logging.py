"""Logging setup for the CLI, the refresh store, and the dashboard."""
from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Loggers that report every connection of the periodic sheet fetches.
NOISY_LOGGERS = ("urllib3",)


def configure_logging(level: str | None = None) -> str:
    """Initialize logging for the complaint dashboard and return the level used.

    The level comes from ``level`` or the ``LOG_LEVEL`` environment variable
    (default ``INFO``). HTTP client loggers stay at ``WARNING`` unless
    ``LOG_HTTP_DEBUG=1`` is set, since the sheet is fetched every refresh.
    """

    resolved_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT)

    http_level = resolved_level if os.getenv("LOG_HTTP_DEBUG", "0") == "1" else "WARNING"
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
    return resolved_level
