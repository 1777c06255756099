"""Structured logging for the HTTP service.

The engine never logs; every record here comes from the request layer.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "fincalc"


class CalculatorJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that stamps every record with time, level and service."""

    def add_fields(
        self, log_record: dict[str, Any], record: logging.LogRecord, message_dict: dict[str, Any]
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def setup_logging(level: str = "INFO", json_output: bool = True) -> None:
    """Configure the root logger with a single stdout handler."""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(CalculatorJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root.addHandler(handler)


def log_calculation(logger: logging.Logger, calculator: str, duration_ms: float, **fields: Any) -> None:
    logger.info(
        "Calculation completed",
        extra={"calculator": calculator, "duration_ms": round(duration_ms, 3), **fields},
    )
