"""
Structured logging configuration
"""

import json
import logging
import sys
from datetime import datetime, timezone

from app.config import LOG_LEVEL


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging"""

    extra_fields = ("submission_id", "locale", "action", "status_code")

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for field in self.extra_fields:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False)


def setup_logger(name: str, level: str = "INFO") -> logging.Logger:
    """Setup structured logger"""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(JSONFormatter())
    logger.addHandler(console_handler)

    # Prevent messages from being passed to the root logger
    logger.propagate = False

    return logger


def mask_email(address: str) -> str:
    """Mask an e-mail address for logging - keeps first char and domain"""
    if not address or "@" not in address:
        return "***masked***"
    local, _, domain = address.partition("@")
    return f"{local[:1]}***@{domain}"


def mask_token(token: str) -> str:
    """Mask API token for logging - shows first 4 and last 4 chars"""
    if not token or len(token) < 12:
        return "***masked***"
    return f"{token[:4]}...{token[-4:]}"


# Application logger
app_logger = setup_logger("app", LOG_LEVEL)
