"""Centralized logging configuration for the containers package.

The library itself only emits DEBUG records through ``seqcontainers.*``
loggers and ships a ``NullHandler``; nothing is printed until an embedder
calls :func:`configure_logging`.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging import Logger
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict

from seqcontainers.config.models import TelemetryConfig

_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Serialize LogRecord fields as JSON for ingestion-friendly logs."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED_ATTRS or key in payload:
                continue
            try:
                json.dumps({key: value})
            except TypeError:
                continue
            payload[key] = value
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    *,
    level: str = "WARNING",
    log_dir: Path | None = None,
    logger_name: str = "seqcontainers",
) -> Logger:
    """Attach JSON handlers to ``logger_name`` (stream, plus file if ``log_dir``)."""

    logger = logging.getLogger(logger_name)
    logger.setLevel(level.upper())
    for previous in list(logger.handlers):
        logger.removeHandler(previous)
        previous.close()

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "containers.jsonl"
        handler = TimedRotatingFileHandler(
            log_file,
            when="midnight",
            backupCount=14,
            encoding="utf-8",
        )
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(JsonFormatter())
    logger.addHandler(stream_handler)

    logger.propagate = False
    logger.debug("JSON logging configured", extra={"log_dir": str(log_dir) if log_dir else None})
    return logger


def configure_from_config(config: TelemetryConfig, logger_name: str = "seqcontainers") -> Logger:
    log_dir = Path(config.log_dir) if config.log_dir else None
    return configure_logging(level=config.log_level, log_dir=log_dir, logger_name=logger_name)


__all__ = ["configure_from_config", "configure_logging", "JsonFormatter"]
