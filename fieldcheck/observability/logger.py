"""
Structured logging for the glue around the validation engine.

Registration, constraint loading and the CLI log through here; the
validation driver never logs. LOG_LEVEL and LOG_FORMAT (json | text)
configure loggers created by setup_logger.
"""
import logging
import os
import sys
import time
from contextlib import contextmanager

from pythonjsonlogger import jsonlogger

DEFAULT_LOGGER_NAME = "fieldcheck"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that always emits timestamp, level and logger name."""

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("timestamp", self.formatTime(record, self.datefmt))
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    format_type: str | None = None,
) -> logging.Logger:
    """
    Configure a logger writing to stderr, replacing any handlers it had.

    Unknown level names fall back to INFO.
    """
    log_level = _level_from_name(level or os.getenv("LOG_LEVEL", "INFO"))
    format_type = format_type or os.getenv("LOG_FORMAT", "json")

    if format_type == "json":
        formatter = CustomJsonFormatter(
            fmt="%(timestamp)s %(level)s %(logger)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    # stdout carries CLI reports
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    logger = logging.getLogger(name)
    return logger if logger.handlers else setup_logger(name)


@contextmanager
def log_operation(operation_name: str, logger: logging.Logger | None = None, **extra_fields):
    """
    Log the start, outcome and duration of a block. Exceptions propagate.

    Usage:
        with log_operation("Loading constraint schemas", logger=logger, path="rules.yaml"):
            ...
    """
    logger = logger or get_logger()
    fields = {"operation": operation_name, **extra_fields}
    logger.info(f"Starting: {operation_name}", extra=fields)
    started = time.perf_counter()
    try:
        yield
    except Exception as e:
        logger.error(
            f"Failed: {operation_name}",
            extra={
                **fields,
                "duration_seconds": round(time.perf_counter() - started, 3),
                "status": "error",
                "error_type": type(e).__name__,
            },
        )
        raise
    logger.info(
        f"Completed: {operation_name}",
        extra={**fields, "duration_seconds": round(time.perf_counter() - started, 3), "status": "success"},
    )
