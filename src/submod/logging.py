import json
import logging
import os
import sys
from datetime import datetime
from typing import Any

from . import config


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.getenv(config.LOG_LEVEL_ENV_VAR) or config.DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, name, logging.WARNING)


class JSONFormatter(logging.Formatter):
    """
    Formatter that outputs JSON strings after parsing the LogRecord.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_record: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        # Extra fields passed via extra={"data": ...}
        if hasattr(record, "data"):
            log_record["data"] = record.data  # type: ignore

        return json.dumps(log_record, default=str)


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """
    Configures the root logger to write JSON lines to stderr.

    stdout stays reserved for the command's own report.
    """
    logger = logging.getLogger()
    logger.setLevel(_resolve_level(level))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter())

    # Replace handlers so repeated setup does not duplicate output
    logger.handlers = []
    logger.addHandler(handler)
    return logger
