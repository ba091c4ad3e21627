"""
Structured logging configuration for tally.

Provides JSON or text logs with a trace_id field so that the log lines of
one accumulator session can be correlated.

Usage:
    from tally.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="session-1")
    logger.debug("Applied operation", extra={"kind": "ADD"})
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from .config import Settings


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logger.

    Uses settings (or Settings.from_env()) for level and format. Logs go to
    stderr so CLI output on stdout stays machine readable.
    """
    settings = settings or Settings.from_env()
    level = getattr(logging, settings.log_level, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())

    if settings.log_format == "json":
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically a session id)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
