"""Logging helpers with structured JSON payloads."""

from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    """Apply the shared log format at ``level`` (names are case-insensitive)."""

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format=LOG_FORMAT,
    )


def structured_log(level: int, **payload: Any) -> None:
    """Emit a JSON-formatted log line for one report event."""

    logging.getLogger().log(level, json.dumps(payload, ensure_ascii=False, sort_keys=True, default=str))
