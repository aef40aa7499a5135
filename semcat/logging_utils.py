"""Logging configuration helpers."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "SEMCAT_LOG_LEVEL"


def configure_logging(level: str | None = None) -> None:
    """Send records to stderr so stdout stays reserved for classification output."""
    normalized = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, normalized, logging.WARNING),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
        force=True,
    )
