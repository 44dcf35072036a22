"""Structured JSON logging for batch runs"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "ledger-fines"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging on stderr, stdout is kept for the report"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_run_summary(
    accounts: int,
    months: int,
    fined_accounts: int,
    dropped_transactions: int,
    duration_ms: float,
) -> None:
    """Log structured run outcome for analysis"""
    logging.info(
        "Run completed",
        extra={
            "step": "run_complete",
            "accounts": accounts,
            "months": months,
            "fined_accounts": fined_accounts,
            "dropped_transactions": dropped_transactions,
            "duration_ms": duration_ms,
        },
    )
