"""
Structured logging for complaint-pipeline

Every module logs through a child of the package logger; the package logger
owns the single stderr handler so stdout stays reserved for CLI output.
Format (json or text) and level come from LOG_FORMAT and LOG_LEVEL.
"""
import logging
import os
import sys
import time

from pythonjsonlogger import jsonlogger

PACKAGE_LOGGER = "complaint_pipeline"

JSON_FORMAT = "%(timestamp)s %(level)s %(logger)s %(message)s"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Output key -> LogRecord attribute
RECORD_FIELDS = {
    "logger": "name",
    "module": "module",
    "function": "funcName",
    "process_id": "process",
    "thread_id": "thread",
}


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Adds timestamp, upper-case level and source location to each JSON line."""

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = log_record.get("timestamp") or self.formatTime(record, self.datefmt)
        log_record["level"] = (log_record.get("level") or record.levelname).upper()
        for key, attribute in RECORD_FIELDS.items():
            log_record[key] = getattr(record, attribute)


def _resolve_level(level: str | None) -> int:
    name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "text":
        return logging.Formatter(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT)
    return CustomJsonFormatter(fmt=JSON_FORMAT, datefmt=DATE_FORMAT)


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str | None = None,
    format_type: str | None = None,
) -> logging.Logger:
    """
    Attach a single stderr handler to a logger

    Calling it again replaces the handler instead of stacking a second one.

    Args:
        name: Logger name
        level: Level name, case-insensitive (default: LOG_LEVEL, then INFO)
        format_type: "json" or "text" (default: LOG_FORMAT, then json)

    Returns:
        The configured logger
    """
    log_level = _resolve_level(level)
    format_type = (format_type or os.getenv("LOG_FORMAT") or "json").lower()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(_build_formatter(format_type))

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Get a logger, configuring on first use

    Loggers inside the package namespace propagate to the package logger
    and carry no handler of their own.
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        if not package_logger.handlers:
            setup_logger(PACKAGE_LOGGER)
        return logging.getLogger(name)

    logger = logging.getLogger(name)
    if not logger.handlers:
        setup_logger(name)
    return logger


class log_operation:
    """
    Log the start, completion or failure of an operation with its duration

    Usage:
        with log_operation("Quality pipeline", logger, total_rows=len(rows)):
            ...

    Exceptions are logged and re-raised.
    """

    def __init__(self, operation_name: str, logger: logging.Logger | None = None, **extra_fields):
        self.operation_name = operation_name
        self.logger = logger or get_logger()
        self.extra_fields = extra_fields
        self._started = 0.0

    def _fields(self, **fields) -> dict:
        return {"operation": self.operation_name, **self.extra_fields, **fields}

    def __enter__(self) -> "log_operation":
        self._started = time.perf_counter()
        self.logger.info(f"Starting: {self.operation_name}", extra=self._fields())
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        duration_ms = round((time.perf_counter() - self._started) * 1000, 1)
        if exc_type is None:
            self.logger.info(
                f"Completed: {self.operation_name} in {duration_ms} ms",
                extra=self._fields(duration_ms=duration_ms, status="success"),
            )
        else:
            self.logger.error(
                f"Failed: {self.operation_name} after {duration_ms} ms: {exc_val}",
                extra=self._fields(
                    duration_ms=duration_ms,
                    status="error",
                    error_type=exc_type.__name__,
                ),
                exc_info=(exc_type, exc_val, exc_tb),
            )
        return False
