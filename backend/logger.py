"""Structured logging configuration for the Page Corpus Explorer."""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

# LogRecord attributes that are not user supplied extras
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields if present, e.g. logger.info("...", extra={"collection": name})
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """
    Set up root logging.

    Args:
        log_level: Level name, e.g. "INFO"
        log_format: "json" for JSONFormatter output, anything else keeps plain text
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))

    if log_format != "json":
        return

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())

    # Replace the plain text handlers installed by config.py
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
