"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from payment_instructions.config import settings


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

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_instruction_outcome(
    request_id: str,
    status: str,
    status_code: str,
    transaction_type: Optional[str],
    amount: Optional[int],
    currency: Optional[str],
    duration_ms: float,
) -> None:
    """Log structured instruction outcome for analysis"""
    level = logging.WARNING if status == "failed" else logging.INFO
    logging.log(
        level,
        "Instruction processed",
        extra={
            "request_id": request_id,
            "step": "instruction_complete",
            "status": status,
            "status_code": status_code,
            "transaction_type": transaction_type,
            "amount": amount,
            "currency": currency,
            "duration_ms": duration_ms,
        },
    )
