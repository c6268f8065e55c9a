"""Logging setup shared by the CLI, the HTTP API and the Streamlit page."""
from __future__ import annotations

import logging
import os

# Pillow logs every PNG chunk at DEBUG.
QUIET_LOGGERS = ("PIL",)


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger for schedule runs.

    ``level`` wins over ``LOG_LEVEL``; both fall back to ``INFO``. Set
    ``LOG_LEVEL=DEBUG`` to see how each finish was classified during
    normalization.
    """

    resolved_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)
