"""Structured JSON logging for template and dashboard computations"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List

from pythonjsonlogger import jsonlogger

from wedding_planner.config import settings

logger = logging.getLogger("wedding_planner")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str | None = None) -> None:
    """Configure structured JSON logging (default level from settings.log_level)"""
    root = logging.getLogger()
    root.setLevel(level or settings.log_level)

    # Remove existing handlers
    root.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)


def log_template_applied(level_id: str, total_budget: float, milestone_count: int) -> None:
    """Log which allocation/milestone template was produced"""
    logger.info(
        "Wedding template applied",
        extra={
            "step": "template_applied",
            "level_id": level_id,
            "total_budget": total_budget,
            "milestone_count": milestone_count,
        },
    )


def log_data_quality_warnings(warnings: List[str], **context: Any) -> None:
    """Log degraded-but-usable results (unknown levels, allocation drift)"""
    for message in warnings:
        logger.warning(message, extra={"step": "data_quality", **context})


def log_dashboard_built(
    category_count: int,
    scheduled_payment_count: int,
    overdue_count: int,
    duration_ms: float,
) -> None:
    """Log dashboard aggregation outcome"""
    logger.info(
        "Client dashboard built",
        extra={
            "step": "dashboard_built",
            "category_count": category_count,
            "scheduled_payment_count": scheduled_payment_count,
            "overdue_count": overdue_count,
            "duration_ms": duration_ms,
        },
    )


def log_payment_plan_generated(template_name: str, actual_cost: float, payment_count: int) -> None:
    logger.info(
        "Payment plan generated",
        extra={
            "step": "payment_plan_generated",
            "template": template_name,
            "actual_cost": actual_cost,
            "payment_count": payment_count,
        },
    )
