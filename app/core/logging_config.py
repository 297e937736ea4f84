"""Logging setup for the dashboard API."""

import logging
import sys
from datetime import datetime

from pythonjsonlogger import jsonlogger

from app.core.config import settings


class DashboardJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that adds timestamp, level and source location."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.utcnow().isoformat() + "Z"
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["source"] = f"{record.filename}:{record.lineno}"


def setup_logging(level: str | None = None, json_format: bool | None = None) -> logging.Logger:
    """Configure the root logger.

    Args:
        level: Log level name. Defaults to ``settings.LOG_LEVEL``.
        json_format: Emit JSON lines instead of plain text. Defaults to ``settings.LOG_JSON``.
    """
    level = (level or settings.LOG_LEVEL).upper()
    if json_format is None:
        json_format = settings.LOG_JSON

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level, logging.INFO))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(
            DashboardJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        )
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
    root_logger.addHandler(handler)

    # SQL echo is controlled separately; keep engine chatter out of app logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    return root_logger
