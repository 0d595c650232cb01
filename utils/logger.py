# -*- coding: utf-8 -*-
"""
Logging configuration.

All modules log through children of the ``telehealth`` logger. Credentials
and banking details never reach a handler: payloads are passed through
``redact()`` before logging and every handler carries a
``SensitiveDataFilter`` as a second line.
"""

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None

SENSITIVE_KEYS = frozenset({
    "password",
    "accountNumber",
    "routingNumber",
    "policyNumber",
    "token",
    "accessToken",
})

_MASK = "***"
_SENSITIVE_PATTERN = re.compile(
    r"""(['"]?(?:%s)['"]?\s*[:=]\s*)(['"]?)[^,'"}\s]+(['"]?)""" % "|".join(sorted(SENSITIVE_KEYS))
)


def redact(payload: Any) -> Any:
    """Return a copy of ``payload`` with sensitive values masked."""
    if isinstance(payload, dict):
        return {
            key: (_MASK if key in SENSITIVE_KEYS and value else redact(value))
            for key, value in payload.items()
        }
    if isinstance(payload, (list, tuple)):
        return [redact(item) for item in payload]
    return payload


class SensitiveDataFilter(logging.Filter):
    """Masks ``key: value`` pairs for sensitive keys in formatted messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = _SENSITIVE_PATTERN.sub(rf"\g<1>\g<2>{_MASK}\g<3>", message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def setup_logger() -> logging.Logger:
    """
    Setup application logger with file and console handlers.
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("telehealth")
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    sensitive_filter = SensitiveDataFilter()

    # File handler with rotation
    file_handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    file_handler.addFilter(sensitive_filter)
    logger.addHandler(file_handler)

    # Console handler (INFO and above)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(message)s"))
    console_handler.addFilter(sensitive_filter)
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
