"""Shared logging configuration for the CRM backend."""

import logging
import json
from datetime import datetime, timezone

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for better parsing."""

    def format(self, record):
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(name: str = "", level=logging.INFO, json_output: bool = False) -> logging.Logger:
    """Set up logging for ``name`` (the root logger by default).

    Calling it again replaces the handler installed by a previous call
    instead of stacking a second one.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_crm_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._crm_handler = True
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    logger.addHandler(handler)

    return logger
