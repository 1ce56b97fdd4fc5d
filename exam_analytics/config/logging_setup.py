"""Process-wide logging configuration for the dashboard API and CLI."""

import json
import logging
import sys
from datetime import datetime, timezone

# `extra=` attributes promoted to top-level JSON keys.
LOGGING_STRUCTURED_FIELDS = ("source_name", "loaded_from", "record_count", "reference_year")


class JsonLogFormatter(logging.Formatter):
    """Render log records as single-line JSON documents.

    Record-source provenance passed through `extra=` (see
    `LOGGING_STRUCTURED_FIELDS`) is emitted as its own keys so log
    pipelines can filter fallbacks without parsing the message text.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field_name in LOGGING_STRUCTURED_FIELDS:
            if hasattr(record, field_name):
                log_entry[field_name] = getattr(record, field_name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False, default=str)


def config_configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Install one stdout handler on the root logger.

    Args:
        level: Logging level name.
        json_output: Use JSON formatting when true, plain text otherwise.

    Returns:
        None: Logging is configured as a side effect.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root_logger.handlers = [handler]

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


__all__ = ["JsonLogFormatter", "LOGGING_STRUCTURED_FIELDS", "config_configure_logging"]
