"""Logging setup: plain or JSON lines on stdout, driven by ObservabilityConfig."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "taskName",
}

_HANDLER_NAME = "route_planner"


class JsonFormatter(logging.Formatter):
    """One JSON object per line, ``extra`` keys merged into the payload."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        for key, value in vars(record).items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    logger_name: str = "route_planner",
) -> logging.Logger:
    """Attach a stdout handler to the package logger.

    Calling it again replaces the handler installed by the previous call.
    """
    config = config or get_config().observability
    logger = logging.getLogger(logger_name)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    return logger
