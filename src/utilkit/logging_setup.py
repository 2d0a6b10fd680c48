# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Structured logging setup for utilkit.

The library only creates module loggers and never calls setup_logging()
itself. Applications embedding utilkit call it once at startup to get the
JSON log file; library code just logs through logging.getLogger(__name__).
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_LOG_DIRNAME = ".utilkit_logs"


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Callers attach structured data via extra={"extra_fields": {...}}
        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


def setup_logging(
    log_dir: Optional[Path] = None,
    log_level: int = logging.INFO,
    console_output: bool = True,
) -> Path:
    """Set up structured logging for the application.

    Args:
        log_dir: Directory for log files. If None, uses .utilkit_logs/
        log_level: Logging level (default: INFO)
        console_output: Whether to also output to console (default: True)

    Returns:
        Path of the JSON log file.
    """
    if log_dir is None:
        log_dir = Path.cwd() / DEFAULT_LOG_DIRNAME

    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Close and drop handlers from a previous call so files are not leaked
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    log_file = log_dir / f"utilkit_{datetime.now(timezone.utc).strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(log_level)
    file_handler.setFormatter(StructuredFormatter())
    root_logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    logging.info(f"Logging initialized. Log directory: {log_dir}")
    return log_file
