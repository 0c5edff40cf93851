"""
Observability module for vin_info
Structured JSON logging and decode events.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "vin_info"


class JSONFormatter(logging.Formatter):
    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, "vin"):
            log_entry["vin"] = record.vin
        return json.dumps(log_entry)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Install a JSON handler on the package logger.

    The library never does this on import; host applications opt in.
    Calling it again replaces the handler instead of stacking a new one.
    """
    if level is None:
        from .config import config
        level = config.LOG_LEVEL

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler.formatter, JSONFormatter):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())
    return package_logger


def log_decode_event(record) -> None:
    """Log a structured decode event for a VinRecord."""
    if not logger.isEnabledFor(logging.DEBUG):
        return

    event = {
        "event_type": "decode",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "wmi": record.wmi(),
        "region": record.region,
        "country": record.country,
        "manufacturer": record.manufacturer,
        "valid_checksum": record.valid_checksum,
    }

    # Log as JSON for easy parsing by log aggregators
    logger.debug(f"DECODE_EVENT: {json.dumps(event)}", extra={"vin": record.vin})
