"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from decision_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_decision(
    request_id: str,
    outcome: str,
    loan_amount: Optional[int],
    loan_period: Optional[int],
    duration_ms: float,
    reason: Optional[str] = None,
) -> None:
    """Log structured decision outcome; never includes the personal code"""
    level = logging.INFO if outcome == "approved" else logging.WARNING
    logging.log(
        level,
        "Decision completed",
        extra={
            "request_id": request_id,
            "step": "decision_complete",
            "outcome": outcome,
            "loan_amount": loan_amount,
            "loan_period": loan_period,
            "reason": reason,
            "duration_ms": duration_ms,
        },
    )
