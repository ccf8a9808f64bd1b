# ============================================================================
# src/medical_report_analyzer/utils/logging.py
# ============================================================================
"""
Logging setup for the report analyzer.

- setup_logging(): console plus optional file handler on the root logger
- JsonFormatter: one JSON object per line, carrying pipeline fields
  (status, report_type, parameter_count) when a record has them
- log_performance(): duration logging for pipeline entry points
"""

import functools
import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from .exceptions import ConfigurationError

# Attributes copied from LogRecord into JSON output when present
PIPELINE_FIELDS = ("status", "report_type", "parameter_count", "abnormal_count")

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    format_json: bool = False
) -> None:
    """
    Configure the root logger, replacing any existing handlers.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_file: Also write to this file (parent directories are created)
        format_json: Emit JsonFormatter lines instead of plain text

    Raises:
        ConfigurationError: unknown level name
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ConfigurationError(f"Unknown log level: {level}")

    formatter = JsonFormatter() if format_json else logging.Formatter(
        TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'
    )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def setup_logging_from_settings() -> None:
    """Configure logging from LoggingSettings (LOG_LEVEL, LOG_FILE, LOG_JSON)."""
    from ..config import logging_settings

    setup_logging(
        level=logging_settings.LOG_LEVEL,
        log_file=logging_settings.LOG_FILE,
        format_json=logging_settings.LOG_JSON,
    )


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        for field in PIPELINE_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def log_performance(logger: logging.Logger, operation: str):
    """
    Decorator logging how long `operation` took, at DEBUG on success and
    ERROR on failure. Exceptions are re-raised unchanged.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{operation} failed after {time.perf_counter() - start:.3f}s: {e}")
                raise
            logger.debug(f"{operation} completed in {time.perf_counter() - start:.3f}s")
            return result

        return wrapper
    return decorator
