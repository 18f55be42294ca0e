from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "EV_ANALYTICS_LOG_FORMAT"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"


def build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    return jsonlogger.JsonFormatter(JSON_FIELDS)


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Route every ev_analytics logger through one root handler.

    JSON output is the default: each record becomes one object with
    ``asctime``, ``levelname``, ``name`` and ``message`` plus whatever the
    call site passed in ``extra``. The loader adds ``source``, ``n_rows``
    and ``n_dropped``, metrics add every ``Metrics`` field, and chart
    renders add ``view_id`` and ``filter_state``. ``plain`` drops the extras
    and prints one readable line per record, for local runs.

    ``force_format`` ("json" or "plain") wins over EV_ANALYTICS_LOG_FORMAT.
    """

    if force_format is not None:
        format_mode = force_format
    else:
        format_mode = os.getenv(LOG_FORMAT_ENV, "json").lower()

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(format_mode))

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)
